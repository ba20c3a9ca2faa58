# apps/pessoal/urls.py

from django.urls import path
from . import views

app_name = 'pessoal'

urlpatterns = [
    # === NOTAS ===
    path('notes', views.notas_view, name='notas'),
    path('notes/<int:nota_id>', views.nota_detalhe_view, name='nota_detalhe'),
    path('notes/<int:nota_id>/share', views.compartilhar_nota_view, name='compartilhar_nota'),

    # === AUTOCUIDADO ===
    path('self-care', views.autocuidado_view, name='autocuidado'),
    path('self-care/metrics', views.metricas_autocuidado_view, name='metricas_autocuidado'),
    path('self-care/<int:registro_id>', views.registro_autocuidado_detalhe_view, name='registro_autocuidado'),
]
