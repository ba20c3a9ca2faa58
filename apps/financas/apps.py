# apps/financas/apps.py

from django.apps import AppConfig


class FinancasConfig(AppConfig):
    """Configuração da app Finanças"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.financas'
    verbose_name = 'Finanças'
