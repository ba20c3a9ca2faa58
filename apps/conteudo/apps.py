# apps/conteudo/apps.py

from django.apps import AppConfig


class ConteudoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.conteudo'
    verbose_name = 'Conteúdo e Branding'
