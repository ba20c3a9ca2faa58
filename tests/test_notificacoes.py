# tests/test_notificacoes.py

from datetime import date
from unittest.mock import AsyncMock, patch

from channels.layers import get_channel_layer
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator

from apps.agenda.models import CompartilhamentoEvento, Evento
from apps.agenda.services import compartilhamento_service
from apps.notificacoes.consumers import nome_grupo_usuario
from apps.notificacoes.models import Notificacao
from apps.notificacoes.routing import websocket_urlpatterns
from apps.notificacoes.services import notificacao_service

from .base import ApiTestCase


class NotificacoesApiTests(ApiTestCase):

    def criar(self, destinatario=None, **extra):
        return notificacao_service.criar_notificacao(
            destinatario or self.dj, 'Aviso', 'Mensagem de teste', **extra
        )

    def test_cria_e_lista_com_filtros(self):
        response = self.post_json('/api/notifications', {
            'title': 'Reunião', 'message': 'Amanhã às 10h', 'userId': self.dj.id
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['type'], 'general')
        self.criar(tipo=Notificacao.Tipo.TRANSACAO_ATRIBUIDA)

        response = self.client.get('/api/notifications', {'userId': self.dj.id})
        self.assertEqual(len(response.json()), 2)

        response = self.client.get('/api/notifications', {'userId': self.dj.id, 'type': 'transaction_assigned'})
        self.assertEqual(len(response.json()), 1)

        response = self.client.get('/api/notifications', {'userId': self.dj.id, 'isRead': 'true'})
        self.assertEqual(response.json(), [])

    def test_listagem_exige_user_id(self):
        self.assertEqual(self.client.get('/api/notifications').status_code, 400)

    def test_tipo_invalido(self):
        response = self.post_json('/api/notifications', {
            'title': 'X', 'message': 'Y', 'userId': self.dj.id, 'type': 'spam'
        })
        self.assertEqual(response.status_code, 400)

    def test_marcar_como_lida_e_idempotente(self):
        notificacao = self.criar()

        response = self.post_json(f'/api/notifications/{notificacao.id}/read')
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['isRead'])

        notificacao.refresh_from_db()
        lida_em = notificacao.lida_em
        self.assertIsNotNone(lida_em)

        self.post_json(f'/api/notifications/{notificacao.id}/read')
        notificacao.refresh_from_db()
        self.assertEqual(notificacao.lida_em, lida_em)

    def test_marcar_todas_como_lidas(self):
        self.criar()
        self.criar()
        self.criar(destinatario=self.outro_dj)

        response = self.put_json(f'/api/notifications/mark-all-read?userId={self.dj.id}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['count'], 2)
        self.assertFalse(Notificacao.objects.filter(destinatario=self.dj, lida=False).exists())
        self.assertTrue(Notificacao.objects.filter(destinatario=self.outro_dj, lida=False).exists())

        response = self.put_json(f'/api/notifications/mark-all-read?userId={self.dj.id}')
        self.assertEqual(response.json()['count'], 0)

    def test_atualiza_e_exclui(self):
        notificacao = self.criar()

        response = self.put_json(f'/api/notifications/{notificacao.id}', {'isRead': True, 'title': 'Novo'})
        self.assertEqual(response.json()['title'], 'Novo')
        self.assertTrue(response.json()['isRead'])

        response = self.client.delete(f'/api/notifications/{notificacao.id}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f'/api/notifications/{notificacao.id}').status_code, 404)


class ResponderConviteTests(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.evento = Evento.objects.create(titulo='Festival', data=date(2026, 12, 10), usuario=self.admin)
        self.compartilhamento, = compartilhamento_service.compartilhar_evento(
            self.evento, [self.dj.id], compartilhado_por=self.admin
        )
        self.notificacao = Notificacao.objects.get(compartilhamento=self.compartilhamento)

    def responder(self, acao, **extra):
        return self.post_json(
            f'/api/notifications/{self.notificacao.id}/respond',
            {'action': acao, **extra}
        )

    def test_aceitar_convite(self):
        response = self.responder('accept', userId=self.dj.id)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['share']['status'], 'accepted')
        self.assertTrue(response.json()['notification']['isRead'])

        eventos = self.client.get('/api/events', {'userId': self.dj.id}).json()
        self.assertEqual([e['id'] for e in eventos], [self.evento.id])

    def test_recusar_convite(self):
        response = self.responder('decline')

        self.assertEqual(response.status_code, 200)
        self.compartilhamento.refresh_from_db()
        self.assertEqual(self.compartilhamento.status, CompartilhamentoEvento.STATUS_RECUSADO)

    def test_resposta_repetida_e_resposta_contraria(self):
        self.assertEqual(self.responder('accept').status_code, 200)
        self.assertEqual(self.responder('accept').status_code, 200)
        self.assertEqual(self.responder('decline').status_code, 409)

    def test_transicao_recusada_ainda_marca_como_lida(self):
        self.compartilhamento.alterar_status(CompartilhamentoEvento.STATUS_ACEITO)

        response = self.responder('decline')

        self.assertEqual(response.status_code, 409)
        self.assertTrue(response.json()['notification']['isRead'])
        self.notificacao.refresh_from_db()
        self.assertTrue(self.notificacao.lida)
        self.compartilhamento.refresh_from_db()
        self.assertEqual(self.compartilhamento.status, CompartilhamentoEvento.STATUS_ACEITO)

    def test_acao_desconhecida(self):
        self.assertEqual(self.responder('maybe').status_code, 400)

    def test_notificacao_sem_convite(self):
        avulsa = notificacao_service.criar_notificacao(self.dj, 'Aviso', 'Sem convite')

        response = self.post_json(f'/api/notifications/{avulsa.id}/respond', {'action': 'accept'})

        self.assertEqual(response.status_code, 400)

    def test_somente_destinatario_responde(self):
        response = self.responder('accept', userId=self.outro_dj.id)

        self.assertEqual(response.status_code, 403)
        self.compartilhamento.refresh_from_db()
        self.assertEqual(self.compartilhamento.status, CompartilhamentoEvento.STATUS_PENDENTE)


class EnvioTempoRealTests(ApiTestCase):

    def test_notificacao_nova_e_publicada_apos_commit(self):
        with patch('apps.notificacoes.signals.get_channel_layer') as get_layer:
            get_layer.return_value.group_send = AsyncMock()

            with self.captureOnCommitCallbacks(execute=False) as callbacks:
                notificacao = notificacao_service.criar_notificacao(self.dj, 'Olá', 'Tempo real')

            get_layer.return_value.group_send.assert_not_awaited()
            self.assertEqual(len(callbacks), 1)

            callbacks[0]()

        grupo, evento = get_layer.return_value.group_send.await_args.args
        self.assertEqual(grupo, nome_grupo_usuario(self.dj.id))
        self.assertEqual(evento['type'], 'notification_message')
        self.assertEqual(evento['message']['id'], notificacao.id)

    def test_atualizacao_nao_publica(self):
        notificacao = notificacao_service.criar_notificacao(self.dj, 'Olá', 'Tempo real')

        with self.captureOnCommitCallbacks() as callbacks:
            notificacao.marcar_como_lida()

        self.assertEqual(callbacks, [])


class NotificacaoConsumerTests(ApiTestCase):

    def conectar(self, usuario_id):
        return WebsocketCommunicator(URLRouter(websocket_urlpatterns), f'/ws/notifications/{usuario_id}/')

    async def test_recebe_notificacoes_do_grupo(self):
        communicator = self.conectar(self.dj.id)
        conectado, _ = await communicator.connect()
        self.assertTrue(conectado)

        await get_channel_layer().group_send(
            nome_grupo_usuario(self.dj.id),
            {'type': 'notification_message', 'message': {'title': 'Oi'}},
        )

        resposta = await communicator.receive_json_from()
        self.assertEqual(resposta, {'type': 'notification', 'message': {'title': 'Oi'}})

        await communicator.disconnect()

    async def test_mark_read_pelo_websocket(self):
        notificacao = await Notificacao.objects.acreate(
            destinatario=self.dj, titulo='Aviso', mensagem='Ler pelo socket'
        )
        communicator = self.conectar(self.dj.id)
        await communicator.connect()

        await communicator.send_json_to({'type': 'mark_read', 'notification_id': notificacao.id})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'notification_read', 'notification_id': notificacao.id})
        await notificacao.arefresh_from_db()
        self.assertTrue(notificacao.lida)

        await communicator.disconnect()

    async def test_usuario_inexistente_e_recusado(self):
        communicator = self.conectar(9999)
        conectado, _ = await communicator.connect()
        self.assertFalse(conectado)
