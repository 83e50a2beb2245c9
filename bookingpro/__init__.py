"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Inicializador del paquete del proyecto. Configura PyMySQL como 
               driver de MySQL para compatibilidad y carga la aplicación Celery 
               para asegurar que las tareas asíncronas se registren al arrancar Django.
--------------------------------------------------------------------------------
"""
import pymysql  # Driver MySQL en Python puro
pymysql.install_as_MySQLdb()  # Django busca 'MySQLdb' cuando DATABASE_URL es mysql://
from .celery import app as celery_app  # Instancia de la aplicación Celery definida en celery.py

__all__ = ('celery_app',)
