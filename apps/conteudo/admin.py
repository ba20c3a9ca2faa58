# apps/conteudo/admin.py

from django.contrib import admin

from .models import Branding, FotoInstagram


@admin.register(FotoInstagram)
class FotoInstagramAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'pasta', 'status', 'agendada_para', 'usuario']
    list_filter = ['status', 'pasta']
    search_fields = ['titulo', 'descricao', 'usuario__nome']


@admin.register(Branding)
class BrandingAdmin(admin.ModelAdmin):
    """Um branding por usuário"""

    list_display = ['usuario', 'criado_por', 'criado_em', 'atualizado_em']
    search_fields = ['usuario__nome', 'usuario__email', 'missao']
    readonly_fields = ['criado_em', 'atualizado_em']
