# apps/projetos/urls.py

from django.urls import path
from . import views

app_name = 'projetos'

urlpatterns = [
    # === PROJETOS ===
    path('projects', views.projetos_view, name='projetos'),
    path('projects/<int:projeto_id>', views.projeto_detalhe_view, name='projeto_detalhe'),

    # === TAREFAS ===
    path('tasks', views.tarefas_view, name='tarefas'),
    path('tasks/<int:tarefa_id>', views.tarefa_detalhe_view, name='tarefa_detalhe'),

    # === DOCUMENTOS ===
    path('documents', views.documentos_view, name='documentos'),
    path('documents/<int:documento_id>', views.documento_detalhe_view, name='documento_detalhe'),
    path('documents/<int:documento_id>/share', views.compartilhar_documento_view, name='compartilhar_documento'),
]
