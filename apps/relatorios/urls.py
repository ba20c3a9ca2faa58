# apps/relatorios/urls.py

from django.urls import path
from . import views

app_name = 'relatorios'

urlpatterns = [
    path('reports/finance', views.relatorio_financeiro_view, name='financeiro'),
    path('reports/finance/csv', views.exportar_financeiro_csv, name='financeiro_csv'),
    path('reports/finance/excel', views.exportar_financeiro_excel, name='financeiro_excel'),
    path('reports/finance/pdf', views.relatorio_financeiro_pdf, name='financeiro_pdf'),
]
