# apps/agenda/urls.py

from django.urls import path
from . import views

app_name = 'agenda'

urlpatterns = [
    # === EVENTOS ===
    path('events', views.eventos_view, name='eventos'),
    path('events/<int:evento_id>', views.evento_detalhe_view, name='evento_detalhe'),

    # === CONVITES ===
    path('event-shares', views.compartilhamentos_view, name='compartilhamentos'),
    path('event-shares/<int:compartilhamento_id>', views.compartilhamento_detalhe_view, name='compartilhamento_detalhe'),

    # === FERIADOS ===
    path('holidays', views.feriados_view, name='feriados'),
]
