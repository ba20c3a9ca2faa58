# apps/__init__.py

"""
Conexão UNK - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: usuários, autenticação, permissões e configurações da empresa
- agenda: eventos, convites e feriados
- financas: transações, despesas fixas e dívidas
- projetos: projetos, tarefas e documentos
- conteudo: fotos do Instagram e branding
- pessoal: notas e autocuidado
- notificacoes: notificações e WebSocket
- relatorios: relatório financeiro em JSON, CSV, Excel e PDF
"""

__version__ = '1.0.0'
__author__ = 'Equipe Conexão UNK'
