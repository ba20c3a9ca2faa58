# apps/conteudo/__init__.py

"""
Conteúdo - Fotos do Instagram e branding do artista
"""
