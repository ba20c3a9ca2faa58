# apps/pessoal/admin.py

from django.contrib import admin

from .models import Nota, RegistroAutocuidado


@admin.register(Nota)
class NotaAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'tipo', 'fixada', 'usuario', 'criado_em']
    list_filter = ['tipo', 'fixada']
    search_fields = ['titulo', 'conteudo', 'usuario__nome']


@admin.register(RegistroAutocuidado)
class RegistroAutocuidadoAdmin(admin.ModelAdmin):
    list_display = ['tipo', 'valor', 'data', 'usuario']
    list_filter = ['tipo', 'data']
    date_hierarchy = 'data'
