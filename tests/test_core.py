# tests/test_core.py

from django.core import mail

from apps.core.models import ConfiguracaoEmpresa, Usuario

from .base import ApiTestCase


class LoginTests(ApiTestCase):

    def test_login_com_credenciais_validas(self):
        response = self.post_json('/api/auth/login', {'email': 'DJ@email.com', 'password': '123456'})

        self.assertEqual(response.status_code, 200)
        corpo = response.json()
        self.assertEqual(corpo['message'], 'Login realizado com sucesso')
        self.assertEqual(corpo['user']['id'], self.dj.id)
        self.assertEqual(corpo['user']['role'], 'dj')
        self.assertNotIn('password', corpo['user'])

    def test_login_sem_campos(self):
        response = self.post_json('/api/auth/login', {'email': 'dj@email.com'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('error', response.json())

    def test_login_email_desconhecido(self):
        response = self.post_json('/api/auth/login', {'email': 'x@email.com', 'password': '123456'})
        self.assertEqual(response.status_code, 404)

    def test_login_senha_incorreta(self):
        response = self.post_json('/api/auth/login', {'email': 'dj@email.com', 'password': 'errada'})
        self.assertEqual(response.status_code, 401)

    def test_bloqueio_apos_tentativas_incorretas(self):
        for _ in range(5):
            self.post_json('/api/auth/login', {'email': 'dj@email.com', 'password': 'errada'})

        response = self.post_json('/api/auth/login', {'email': 'dj@email.com', 'password': '123456'})
        self.assertEqual(response.status_code, 429)

    def test_metodo_nao_permitido(self):
        response = self.client.get('/api/auth/login')
        self.assertEqual(response.status_code, 405)
        self.assertEqual(response['Allow'], 'POST')


class CadastroTests(ApiTestCase):

    def test_cadastro_cria_dj_por_padrao(self):
        response = self.post_json('/api/auth/register', {
            'email': 'Novo@Email.com', 'password': 'segredo1', 'name': 'DJ Novo'
        })

        self.assertEqual(response.status_code, 201)
        usuario = Usuario.objects.get(email='novo@email.com')
        self.assertEqual(usuario.tipo, Usuario.TIPO_DJ)
        self.assertTrue(usuario.check_password('segredo1'))
        self.assertEqual(len(mail.outbox), 1)

    def test_cadastro_email_duplicado(self):
        response = self.post_json('/api/auth/register', {
            'email': 'dj@email.com', 'password': 'segredo1', 'name': 'Repetido'
        })
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()['error'], 'Email já cadastrado')

    def test_cadastro_validacoes(self):
        casos = [
            {'password': 'segredo1', 'name': 'Sem email'},
            {'email': 'invalido', 'password': 'segredo1', 'name': 'Email ruim'},
            {'email': 'curta@email.com', 'password': '123', 'name': 'Senha curta'},
            {'email': 'role@email.com', 'password': 'segredo1', 'name': 'Role', 'role': 'root'},
        ]
        for dados in casos:
            with self.subTest(dados=dados):
                response = self.post_json('/api/auth/register', dados)
                self.assertEqual(response.status_code, 400)


class UsuariosTests(ApiTestCase):

    def test_lista_ordenada_por_nome_com_filtros(self):
        response = self.client.get('/api/users', {'excludeId': self.admin.id})

        nomes = [u['name'] for u in response.json()]
        self.assertEqual(nomes, ['DJ Alfa', 'DJ Beta'])

        response = self.client.get('/api/users', {'role': 'admin'})
        self.assertEqual([u['id'] for u in response.json()], [self.admin.id])

    def test_atualiza_perfil(self):
        response = self.put_json(f'/api/users/{self.dj.id}', {
            'bio': 'House e techno', 'pixKey': 'dj@pix', 'socialMedia': {'instagram': '@djalfa'}
        })

        self.assertEqual(response.status_code, 200)
        self.dj.refresh_from_db()
        self.assertEqual(self.dj.chave_pix, 'dj@pix')
        self.assertEqual(response.json()['socialMedia'], {'instagram': '@djalfa'})

    def test_perfil_rejeita_valores_que_nao_sao_texto(self):
        for campo, valor in [('name', 123), ('bio', ['house']), ('phone', 5585999990000)]:
            with self.subTest(campo=campo):
                response = self.put_json(f'/api/users/{self.dj.id}', {campo: valor})
                self.assertEqual(response.status_code, 400)

        self.dj.refresh_from_db()
        self.assertEqual(self.dj.nome, 'DJ Alfa')

    def test_usuario_inexistente(self):
        self.assertEqual(self.client.get('/api/users/9999').status_code, 404)


class ConfiguracaoEmpresaTests(ApiTestCase):

    def test_ciclo_do_registro_unico(self):
        self.assertEqual(self.client.get('/api/company-settings').status_code, 404)
        self.assertEqual(self.put_json('/api/company-settings', {'name': 'X'}).status_code, 404)

        response = self.post_json('/api/company-settings', {'name': 'Conexão UNK', 'theme': {'primary': '#000'}})
        self.assertEqual(response.status_code, 201)

        response = self.post_json('/api/company-settings', {'name': 'Outra'})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(ConfiguracaoEmpresa.objects.count(), 1)

        response = self.put_json('/api/company-settings', {'website': 'https://unk.com.br'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['website'], 'https://unk.com.br')


class HealthCheckTests(ApiTestCase):

    def test_banco_e_cache_saudaveis(self):
        response = self.client.get('/api/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'healthy')
