# apps/notificacoes/signals.py

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from .consumers import nome_grupo_usuario
from .models import Notificacao

logger = logging.getLogger(__name__)


def enviar_notificacao_tempo_real(notificacao_id, usuario_id, payload):
    """Publica a notificação no grupo WebSocket do destinatário"""
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return

    try:
        async_to_sync(channel_layer.group_send)(
            nome_grupo_usuario(usuario_id),
            {
                'type': 'notification_message',
                'message': payload,
            }
        )
    except Exception:
        logger.exception(f"Falha ao enviar notificação {notificacao_id} via WebSocket")


@receiver(post_save, sender=Notificacao)
def publicar_notificacao(sender, instance, created, **kwargs):
    """
    Envia notificações novas via WebSocket após o commit
    Se a transação for desfeita, nada é enviado
    """
    if not created:
        return

    payload = instance.para_dict()
    transaction.on_commit(
        lambda: enviar_notificacao_tempo_real(instance.id, instance.destinatario_id, payload)
    )
