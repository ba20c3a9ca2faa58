# apps/notificacoes/urls.py

from django.urls import path
from . import views

app_name = 'notificacoes'

urlpatterns = [
    path('notifications', views.notificacoes_view, name='notificacoes'),
    path('notifications/mark-all-read', views.marcar_todas_lidas_view, name='marcar_todas_lidas'),
    path('notifications/<int:notificacao_id>', views.notificacao_detalhe_view, name='notificacao_detalhe'),
    path('notifications/<int:notificacao_id>/read', views.marcar_lida_view, name='marcar_lida'),
    path('notifications/<int:notificacao_id>/respond', views.responder_notificacao_view, name='responder'),
]
