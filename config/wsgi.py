# config/wsgi.py

"""
Ponto de entrada WSGI (apenas HTTP)
O WebSocket de notificações exige o ASGI em config/asgi.py
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

application = get_wsgi_application()
