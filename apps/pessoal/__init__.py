# apps/pessoal/__init__.py

"""
Pessoal - Notas e registros de autocuidado
"""
