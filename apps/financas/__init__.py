# apps/financas/__init__.py

"""
Finanças - Receitas, despesas, despesas fixas, dívidas e atribuição de receitas a DJs
"""
