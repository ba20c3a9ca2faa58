# apps/projetos/admin.py

from django.contrib import admin

from .models import Documento, Projeto, Tarefa


class TarefaInline(admin.TabularInline):
    model = Tarefa
    extra = 0
    fields = ['titulo', 'prioridade', 'concluida', 'data_limite']


@admin.register(Projeto)
class ProjetoAdmin(admin.ModelAdmin):
    """Admin para projetos com tarefas inline"""

    list_display = ['titulo', 'categoria', 'status', 'progresso', 'prazo', 'usuario', 'tarefas_count']
    list_filter = ['categoria', 'status']
    search_fields = ['titulo', 'descricao', 'usuario__nome']
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [TarefaInline]

    def tarefas_count(self, obj):
        """Conta tarefas do projeto"""
        return obj.tarefas.count()

    tarefas_count.short_description = 'Tarefas'


@admin.register(Documento)
class DocumentoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'categoria', 'tipo_arquivo', 'projeto', 'usuario', 'criado_em']
    list_filter = ['categoria', 'tipo_arquivo']
    search_fields = ['titulo', 'nome_arquivo', 'usuario__nome']
