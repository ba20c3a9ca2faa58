# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('auth/login', views.login_view, name='login'),
    path('auth/register', views.cadastro_view, name='cadastro'),

    # === USUÁRIOS ===
    path('users', views.usuarios_view, name='usuarios'),
    path('users/<int:usuario_id>', views.usuario_detalhe_view, name='usuario_detalhe'),

    # === CONFIGURAÇÕES DA EMPRESA ===
    path('company-settings', views.configuracao_empresa_view, name='configuracao_empresa'),

    # === MONITORAMENTO ===
    path('health', views.health_check_view, name='health'),
]
