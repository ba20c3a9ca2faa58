# tests/test_pessoal.py

from datetime import date

from apps.notificacoes.models import Notificacao
from apps.pessoal.models import Nota, RegistroAutocuidado

from .base import ApiTestCase


class NotasTests(ApiTestCase):

    def test_cria_nota(self):
        response = self.post_json('/api/notes', {'content': 'Abrir o set com house', 'userId': self.dj.id})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['type'], 'general')
        self.assertFalse(response.json()['pinned'])

    def test_conteudo_obrigatorio(self):
        response = self.post_json('/api/notes', {'title': 'Vazia', 'userId': self.dj.id})
        self.assertEqual(response.status_code, 400)

    def test_fixadas_primeiro_e_filtros(self):
        Nota.objects.create(conteudo='Primeira', tipo='idea', usuario=self.dj)
        Nota.objects.create(conteudo='Fixada', tipo='diary', fixada=True, usuario=self.dj)
        Nota.objects.create(conteudo='De outro DJ', usuario=self.outro_dj)

        todas = self.client.get('/api/notes', {'userId': self.dj.id}).json()
        self.assertEqual([n['content'] for n in todas], ['Fixada', 'Primeira'])

        ideias = self.client.get('/api/notes', {'userId': self.dj.id, 'type': 'idea'}).json()
        self.assertEqual([n['content'] for n in ideias], ['Primeira'])

        fixadas = self.client.get('/api/notes', {'userId': self.dj.id, 'pinned': 'true'}).json()
        self.assertEqual([n['content'] for n in fixadas], ['Fixada'])

    def test_fixar_e_excluir(self):
        nota = Nota.objects.create(conteudo='Ideia', usuario=self.dj)

        response = self.put_json(f'/api/notes/{nota.id}', {'pinned': True})
        self.assertTrue(response.json()['pinned'])

        self.assertEqual(self.client.delete(f'/api/notes/{nota.id}').status_code, 200)
        self.assertFalse(Nota.objects.exists())

    def test_compartilhar_nota(self):
        nota = Nota.objects.create(titulo='Setlist', conteudo='...', usuario=self.dj)

        response = self.post_json(f'/api/notes/{nota.id}/share', {'userIds': [self.outro_dj.id]})

        self.assertEqual(response.status_code, 201)
        notificacao = Notificacao.objects.get(destinatario=self.outro_dj)
        self.assertEqual(notificacao.tipo, Notificacao.Tipo.NOTA_COMPARTILHADA)
        self.assertIn('Setlist', notificacao.mensagem)


class AutocuidadoTests(ApiTestCase):

    def registrar(self, tipo, valor, dia='2026-10-10', usuario=None):
        return RegistroAutocuidado.objects.create(
            tipo=tipo, valor=valor, data=date.fromisoformat(dia), usuario=usuario or self.dj
        )

    def test_cria_registro(self):
        response = self.post_json('/api/self-care', {
            'type': 'sleep', 'value': 7.5, 'date': '2026-10-10', 'notes': 'Dormi bem', 'userId': self.dj.id
        })

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['value'], '7.5')
        self.assertEqual(response.json()['date'], '2026-10-10')

    def test_tipo_invalido(self):
        response = self.post_json('/api/self-care', {'type': 'diet', 'value': '1', 'userId': self.dj.id})
        self.assertEqual(response.status_code, 400)

    def test_listagem_por_tipo(self):
        self.registrar('mood', '8')
        self.registrar('sleep', '7h')

        response = self.client.get('/api/self-care', {'userId': self.dj.id, 'type': 'mood'})

        self.assertEqual([r['value'] for r in response.json()], ['8'])

    def test_metricas_do_dia(self):
        self.registrar('mood', '8')
        self.registrar('mood', '5')
        self.registrar('sleep', '6.5h')
        self.registrar('gratitude', 'Show lotado')
        self.registrar('gratitude', 'Família')
        self.registrar('activity', 'Corrida', dia='2026-10-09')
        self.registrar('mood', '9', usuario=self.outro_dj)

        response = self.client.get('/api/self-care/metrics', {'userId': self.dj.id, 'date': '2026-10-10'})

        self.assertEqual(response.json(), {
            'userId': self.dj.id,
            'date': '2026-10-10',
            'activeDays': 2,
            'mood': '8',
            'sleep': '6.5h',
            'gratitude': 2,
        })

    def test_metricas_sem_registros(self):
        response = self.client.get('/api/self-care/metrics', {'userId': self.dj.id, 'date': '2026-10-10'})

        dados = response.json()
        self.assertEqual(dados['activeDays'], 0)
        self.assertEqual(dados['mood'], 'N/A')
        self.assertEqual(dados['sleep'], '0.0h')
        self.assertEqual(dados['gratitude'], 0)

    def test_metricas_exigem_usuario(self):
        self.assertEqual(self.client.get('/api/self-care/metrics').status_code, 400)
        self.assertEqual(self.client.get('/api/self-care/metrics', {'userId': 9999}).status_code, 404)
