# apps/agenda/__init__.py

"""
Agenda - Eventos, convites de eventos e feriados nacionais
"""
