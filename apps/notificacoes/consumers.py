# apps/notificacoes/consumers.py

import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.conf import settings
from django.contrib.auth import get_user_model

from .models import Notificacao

logger = logging.getLogger(__name__)
Usuario = get_user_model()


def nome_grupo_usuario(usuario_id):
    """Grupo do channel layer que recebe as notificações de um usuário"""
    return settings.UNK_GRUPO_NOTIFICACOES.format(user_id=usuario_id)


class NotificacaoConsumer(AsyncWebsocketConsumer):
    """
    Consumer WebSocket de notificações do usuário

    O cliente se conecta em ws/notifications/<user_id>/ e recebe cada
    notificação criada para ele. Também pode marcar notificações como lidas.
    """

    async def connect(self):
        """
        Conecta o usuário ao seu grupo pessoal de notificações
        Recusa a conexão se o usuário não existir
        """
        self.usuario_id = int(self.scope['url_route']['kwargs']['user_id'])

        if not await self.usuario_existe(self.usuario_id):
            await self.close()
            return

        self.user_group_name = nome_grupo_usuario(self.usuario_id)

        await self.channel_layer.group_add(
            self.user_group_name,
            self.channel_name
        )

        await self.accept()
        logger.info(f"Notificações conectadas para usuário {self.usuario_id}")

    async def disconnect(self, close_code):
        if hasattr(self, 'user_group_name'):
            await self.channel_layer.group_discard(
                self.user_group_name,
                self.channel_name
            )

            logger.info(f"Notificações desconectadas para usuário {self.usuario_id}")

    async def receive(self, text_data):
        """
        Processa comandos do cliente

        {"type": "mark_read", "notification_id": 10}
        """
        try:
            data = json.loads(text_data)
        except json.JSONDecodeError:
            await self.send_erro('Mensagem inválida')
            return

        if data.get('type') == 'mark_read':
            marcada = await self.marcar_notificacao_lida(data.get('notification_id'))
            if marcada:
                await self.send(text_data=json.dumps({
                    'type': 'notification_read',
                    'notification_id': data.get('notification_id'),
                }))
            else:
                await self.send_erro('Notificação não encontrada')

    async def notification_message(self, event):
        """Envia notificação para o usuário"""
        await self.send(text_data=json.dumps({
            'type': 'notification',
            'message': event['message']
        }))

    async def send_erro(self, mensagem):
        await self.send(text_data=json.dumps({
            'type': 'error',
            'message': mensagem
        }))

    @database_sync_to_async
    def usuario_existe(self, usuario_id):
        return Usuario.objects.filter(id=usuario_id, is_active=True).exists()

    @database_sync_to_async
    def marcar_notificacao_lida(self, notification_id):
        """Marca como lida apenas notificações do próprio usuário"""
        try:
            notificacao = Notificacao.objects.get(
                id=notification_id,
                destinatario_id=self.usuario_id
            )
        except (Notificacao.DoesNotExist, ValueError, TypeError):
            return False

        notificacao.marcar_como_lida()
        return True
