# apps/agenda/apps.py

from django.apps import AppConfig


class AgendaConfig(AppConfig):
    """Configuração da app Agenda"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.agenda'
    verbose_name = 'Agenda - Eventos e Convites'
