# apps/core/__init__.py

"""
Core - Aplicação base da Conexão UNK

Contém:
- Usuario (admin/dj) e ConfiguracaoEmpresa
- Login, cadastro e perfis
- Regras de permissão e utilitários das APIs JSON
- Comando de seed para desenvolvimento
"""
