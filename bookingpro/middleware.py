"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:   Middleware personalizado para interceptar cada petición HTTP, 
               medir el tiempo que tarda el servidor en responder y dejarlo
               en el log de rendimiento (logger 'bookingpro.rendimiento').
--------------------------------------------------------------------------------
"""
import logging
import time

logger = logging.getLogger("bookingpro.rendimiento")

# Rutas que no se miden (estáticos, media, admin)
RUTAS_EXCLUIDAS = ("/static/", "/media/", "/admin/")


class MonitorRendimientoMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        inicio = time.monotonic()
        response = self.get_response(request)
        duracion_ms = int((time.monotonic() - inicio) * 1000)

        path = request.path
        if not path.startswith(RUTAS_EXCLUIDAS):
            try:
                # Usuario de la request (o "Anónimo" si no está logueado)
                usuario = (
                    request.user.get_username()
                    if hasattr(request, "user") and request.user.is_authenticated
                    else "Anónimo"
                )
                logger.info(
                    "%s %s -> %s (%d ms) usuario=%s",
                    request.method,
                    path[:255],
                    getattr(response, "status_code", 200),
                    duracion_ms,
                    usuario,
                )
            except Exception:
                # Nunca reventar la request por un problema de logging
                pass

        return response
