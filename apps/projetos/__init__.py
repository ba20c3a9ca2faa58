# apps/projetos/__init__.py

"""
Projetos - Projetos, tarefas e documentos
"""
