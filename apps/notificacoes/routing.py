# apps/notificacoes/routing.py

from django.urls import re_path
from . import consumers

# Rotas WebSocket da aplicação de notificações
websocket_urlpatterns = [
    re_path(r'ws/notifications/(?P<user_id>\d+)/$', consumers.NotificacaoConsumer.as_asgi()),
]
