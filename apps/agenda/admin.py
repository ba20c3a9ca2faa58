# apps/agenda/admin.py

from django.contrib import admin

from .models import CompartilhamentoEvento, Evento


class CompartilhamentoInline(admin.TabularInline):
    model = CompartilhamentoEvento
    fk_name = 'evento'
    extra = 0
    fields = ['usuario', 'compartilhado_por', 'status', 'criado_em']
    readonly_fields = ['criado_em']


@admin.register(Evento)
class EventoAdmin(admin.ModelAdmin):
    """Admin para eventos da agenda"""

    list_display = ['titulo', 'data', 'hora', 'usuario', 'status', 'compartilhado']
    list_filter = ['status', 'compartilhado', 'data']
    search_fields = ['titulo', 'descricao', 'local', 'usuario__nome']
    date_hierarchy = 'data'
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [CompartilhamentoInline]


@admin.register(CompartilhamentoEvento)
class CompartilhamentoEventoAdmin(admin.ModelAdmin):
    list_display = ['evento', 'usuario', 'compartilhado_por', 'status', 'criado_em']
    list_filter = ['status']
    search_fields = ['evento__titulo', 'usuario__nome', 'usuario__email']
