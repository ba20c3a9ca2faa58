# apps/financas/urls.py

from django.urls import path
from . import views

app_name = 'financas'

urlpatterns = [
    # === TRANSAÇÕES ===
    path('transactions', views.transacoes_view, name='transacoes'),
    path('transactions/<int:transacao_id>', views.transacao_detalhe_view, name='transacao_detalhe'),

    # === DESPESAS FIXAS ===
    path('fixed-expenses', views.despesas_fixas_view, name='despesas_fixas'),
    path('fixed-expenses/<int:despesa_id>', views.despesa_fixa_detalhe_view, name='despesa_fixa_detalhe'),

    # === DÍVIDAS ===
    path('debts', views.dividas_view, name='dividas'),
    path('debts/<int:divida_id>', views.divida_detalhe_view, name='divida_detalhe'),
]
