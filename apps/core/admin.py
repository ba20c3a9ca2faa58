# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import ConfiguracaoEmpresa, Usuario


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = ['email', 'nome', 'tipo_badge', 'is_active', 'criado_em']
    list_filter = ['tipo', 'is_staff', 'is_active', 'criado_em']
    search_fields = ['email', 'nome', 'localizacao']
    ordering = ['nome']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Perfil Conexão UNK', {
            'fields': (
                'nome', 'tipo', 'bio', 'avatar', 'portfolio',
                'telefone', 'localizacao', 'chave_pix', 'redes_sociais',
            )
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Perfil Conexão UNK', {
            'fields': ('email', 'nome', 'tipo')
        }),
    )

    def tipo_badge(self, obj):
        """Exibe o tipo de usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',
            'dj': '#8B5CF6',
        }
        cor = cores.get(obj.tipo, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_tipo_display()
        )

    tipo_badge.short_description = 'Tipo'


@admin.register(ConfiguracaoEmpresa)
class ConfiguracaoEmpresaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'email', 'telefone', 'website', 'atualizado_em']
    readonly_fields = ['criado_em', 'atualizado_em']

    def has_add_permission(self, request):
        # Registro único
        return not ConfiguracaoEmpresa.objects.exists()
