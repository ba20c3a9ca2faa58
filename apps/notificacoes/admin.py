# apps/notificacoes/admin.py

from django.contrib import admin

from .models import Notificacao


@admin.register(Notificacao)
class NotificacaoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'destinatario', 'tipo', 'lida', 'criado_em']
    list_filter = ['tipo', 'lida', 'criado_em']
    search_fields = ['titulo', 'mensagem', 'destinatario__nome', 'destinatario__email']
    readonly_fields = ['criado_em', 'lida_em']
    actions = ['marcar_como_lidas']

    @admin.action(description='Marcar selecionadas como lidas')
    def marcar_como_lidas(self, request, queryset):
        for notificacao in queryset:
            notificacao.marcar_como_lida()
