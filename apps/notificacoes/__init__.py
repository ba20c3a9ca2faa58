# apps/notificacoes/__init__.py

"""
Notificações - criação, leitura, resposta a convites e envio via WebSocket
"""
