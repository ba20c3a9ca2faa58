# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API JSON consumida pelo cliente
    path('api/', include('apps.core.urls')),
    path('api/', include('apps.agenda.urls')),
    path('api/', include('apps.financas.urls')),
    path('api/', include('apps.projetos.urls')),
    path('api/', include('apps.conteudo.urls')),
    path('api/', include('apps.pessoal.urls')),
    path('api/', include('apps.notificacoes.urls')),
    path('api/', include('apps.relatorios.urls')),
]

# Servir arquivos estáticos em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# Customizar títulos do admin
admin.site.site_header = 'Conexão UNK Admin'
admin.site.site_title = 'Conexão UNK'
admin.site.index_title = 'Administração do Sistema'
