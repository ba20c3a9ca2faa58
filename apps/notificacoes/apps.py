# apps/notificacoes/apps.py

from django.apps import AppConfig


class NotificacoesConfig(AppConfig):
    """Configuração da app Notificações"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.notificacoes'
    verbose_name = 'Notificações'

    def ready(self):
        from . import signals  # noqa: F401
