# apps/conteudo/urls.py

from django.urls import path
from . import views

app_name = 'conteudo'

urlpatterns = [
    # === FOTOS DO INSTAGRAM ===
    path('instagram-photos', views.fotos_view, name='fotos'),
    path('instagram-photos/<int:foto_id>', views.foto_detalhe_view, name='foto_detalhe'),
    path('instagram-photos/<int:foto_id>/share', views.compartilhar_foto_view, name='compartilhar_foto'),

    # === BRANDING ===
    path('brandings', views.brandings_view, name='brandings'),
    path('brandings/user/<int:usuario_id>', views.branding_usuario_view, name='branding_usuario'),
    path('brandings/<int:branding_id>', views.branding_detalhe_view, name='branding_detalhe'),
    path('brandings/<int:branding_id>/share', views.compartilhar_branding_view, name='compartilhar_branding'),
]
