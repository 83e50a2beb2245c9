"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Mapeo de URLs para la aplicación Salas (endpoints de API v1).
--------------------------------------------------------------------------------
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .api import SalaViewSet

app_name = 'salas'

# --- Configuración de rutas de API v1 ---
router = DefaultRouter()
router.register(r'api/v1/salas', SalaViewSet, basename='api-salas')

urlpatterns = [
    path('', include(router.urls)),
]
