# apps/financas/admin.py

from django.contrib import admin

from .models import DespesaFixa, Divida, Transacao


@admin.register(Transacao)
class TransacaoAdmin(admin.ModelAdmin):
    """Admin para receitas e despesas"""

    list_display = ['descricao', 'tipo', 'valor', 'data', 'usuario', 'atribuida_a']
    list_filter = ['tipo', 'categoria', 'data']
    search_fields = ['descricao', 'categoria', 'usuario__nome', 'atribuida_a__nome']
    date_hierarchy = 'data'
    readonly_fields = ['criado_em', 'atualizado_em']


@admin.register(DespesaFixa)
class DespesaFixaAdmin(admin.ModelAdmin):
    list_display = ['descricao', 'valor', 'dia_vencimento', 'ativa', 'usuario']
    list_filter = ['ativa', 'categoria']
    search_fields = ['descricao', 'usuario__nome']


@admin.register(Divida)
class DividaAdmin(admin.ModelAdmin):
    list_display = ['descricao', 'credor', 'valor_total', 'valor_restante', 'data_vencimento', 'usuario']
    search_fields = ['descricao', 'credor', 'usuario__nome']
