# apps/relatorios/__init__.py

"""
Relatórios - Relatório financeiro do usuário

Funcionalidades:
- Resumo em JSON (receitas, despesas, despesas fixas, dívidas e saldo)
- Extrato em PDF (ReportLab)
- Exportação CSV/Excel
"""
