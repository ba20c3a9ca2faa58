# apps/projetos/apps.py

from django.apps import AppConfig


class ProjetosConfig(AppConfig):
    """Configuração da app Projetos"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.projetos'
    verbose_name = 'Projetos e Documentos'
