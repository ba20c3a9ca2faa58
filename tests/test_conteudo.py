# tests/test_conteudo.py

from apps.conteudo.models import Branding, FotoInstagram
from apps.notificacoes.models import Notificacao
from apps.projetos.models import Projeto

from .base import ApiTestCase


class FotosInstagramTests(ApiTestCase):

    def criar_foto(self, **extra):
        dados = {
            'title': 'Backstage',
            'fileName': 'backstage.jpg',
            'fileUrl': 'https://arquivos/backstage.jpg',
            'folder': 'festival',
            'userId': self.dj.id,
        }
        dados.update(extra)
        return self.post_json('/api/instagram-photos', dados)

    def test_cria_foto(self):
        projeto = Projeto.objects.create(titulo='Divulgação', categoria='instagram', usuario=self.dj)

        response = self.criar_foto(projectId=projeto.id, scheduledDate='2026-12-01T18:00:00')

        self.assertEqual(response.status_code, 201)
        dados = response.json()
        self.assertEqual(dados['status'], 'draft')
        self.assertEqual(dados['project'], {'id': projeto.id, 'title': 'Divulgação'})
        self.assertIsNotNone(dados['scheduledDate'])

    def test_campos_obrigatorios(self):
        response = self.criar_foto(folder='')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Campos obrigatórios não fornecidos')

    def test_filtros(self):
        self.criar_foto()
        self.criar_foto(title='Capa', folder='ep', status='scheduled')

        por_pasta = self.client.get('/api/instagram-photos', {'userId': self.dj.id, 'folder': 'ep'})
        por_status = self.client.get('/api/instagram-photos', {'userId': self.dj.id, 'status': 'draft'})

        self.assertEqual([f['title'] for f in por_pasta.json()], ['Capa'])
        self.assertEqual([f['title'] for f in por_status.json()], ['Backstage'])

    def test_marcar_como_publicada(self):
        foto_id = self.criar_foto().json()['id']

        response = self.put_json(f'/api/instagram-photos/{foto_id}', {
            'status': 'posted', 'postedDate': '2026-12-02T10:00:00'
        })

        self.assertEqual(response.json()['status'], 'posted')
        self.assertIsNotNone(FotoInstagram.objects.get(id=foto_id).publicada_em)

    def test_compartilhar_foto(self):
        foto_id = self.criar_foto().json()['id']

        response = self.post_json(f'/api/instagram-photos/{foto_id}/share', {
            'userIds': [self.outro_dj.id], 'sharedBy': self.dj.id
        })

        self.assertEqual(response.status_code, 201)
        notificacao = Notificacao.objects.get(destinatario=self.outro_dj)
        self.assertEqual(notificacao.tipo, Notificacao.Tipo.FOTO_COMPARTILHADA)
        self.assertEqual(notificacao.recurso, 'instagram_photo')


class BrandingTests(ApiTestCase):

    def criar_branding(self, dono, criador, **extra):
        dados = {'userId': dono.id, 'createdBy': criador.id, 'mission': 'Fazer a pista dançar'}
        dados.update(extra)
        return self.post_json('/api/brandings', dados)

    def test_dj_cria_proprio_branding(self):
        response = self.criar_branding(self.dj, self.dj, voiceTone='Descontraído')

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['voiceTone'], 'Descontraído')
        self.assertFalse(Notificacao.objects.exists())

    def test_admin_cria_branding_para_dj(self):
        response = self.criar_branding(self.dj, self.admin)

        self.assertEqual(response.status_code, 201)
        notificacao = Notificacao.objects.get(destinatario=self.dj)
        self.assertEqual(notificacao.tipo, Notificacao.Tipo.BRANDING_CRIADO)
        self.assertEqual(notificacao.titulo, 'Novo branding criado')
        self.assertEqual(notificacao.recurso_id, response.json()['id'])

    def test_dj_nao_cria_branding_para_outro(self):
        response = self.criar_branding(self.outro_dj, self.dj)

        self.assertEqual(response.status_code, 403)
        self.assertFalse(Branding.objects.exists())

    def test_um_branding_por_usuario(self):
        self.criar_branding(self.dj, self.dj)

        response = self.criar_branding(self.dj, self.admin)

        self.assertEqual(response.status_code, 409)
        self.assertEqual(Branding.objects.count(), 1)
        self.assertFalse(Notificacao.objects.exists())

    def test_campos_obrigatorios(self):
        response = self.post_json('/api/brandings', {'userId': self.dj.id})
        self.assertEqual(response.status_code, 400)

    def test_busca_por_usuario(self):
        branding_id = self.criar_branding(self.dj, self.admin).json()['id']

        response = self.client.get(f'/api/brandings/user/{self.dj.id}')
        self.assertEqual(response.json()['id'], branding_id)

        response = self.client.get(f'/api/brandings/user/{self.outro_dj.id}')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['error'], 'Branding não encontrado')

    def test_filtro_por_criador(self):
        self.criar_branding(self.dj, self.admin)
        self.criar_branding(self.outro_dj, self.outro_dj)

        response = self.client.get('/api/brandings', {'createdBy': self.admin.id})

        self.assertEqual([b['userId'] for b in response.json()], [self.dj.id])

    def test_compartilhar_branding(self):
        branding_id = self.criar_branding(self.dj, self.dj).json()['id']

        response = self.post_json(f'/api/brandings/{branding_id}/share', {'userIds': [self.admin.id]})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['notifications'][0]['type'], 'branding_share')
