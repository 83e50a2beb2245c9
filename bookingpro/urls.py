"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Archivo principal de enrutamiento URL del proyecto. Delega en las
               URLs de cada aplicación (salas y reservas) y expone el admin.
--------------------------------------------------------------------------------
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls), # Panel de administración de Django
    path('', include('salas.urls', namespace='salas')), # API del directorio de salas
    path('', include('reservas.urls', namespace='reservas')), # API del libro de reservas
]
