# apps/pessoal/apps.py

from django.apps import AppConfig


class PessoalConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.pessoal'
    verbose_name = 'Notas e Autocuidado'
