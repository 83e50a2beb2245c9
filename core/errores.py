"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Errores tipados del núcleo de reservas. Cada error lleva
                       un 'codigo' estable (legible por máquina) que la capa web
                       traduce a un código HTTP y a un mensaje para el usuario.
                       Los servicios nunca arman textos de presentación.
--------------------------------------------------------------------------------
"""


class ErrorReserva(Exception):
    """
    Error base del dominio.
    - codigo: razón estable, p. ej. 'fecha_ya_reservada'.
    - detalle: datos opcionales para quien consume el error (ids, campos).
    """
    # Código HTTP sugerido para la capa web.
    status_http = 400

    def __init__(self, codigo: str, detalle: dict | None = None):
        self.codigo = codigo
        self.detalle = detalle or {}
        super().__init__(codigo)

    def __repr__(self):
        return f"{type(self).__name__}({self.codigo!r}, {self.detalle!r})"


class ValidationError(ErrorReserva):
    """Entrada mal formada o incompleta (error del llamador)."""
    status_http = 400


class NotFoundError(ErrorReserva):
    """La entidad referenciada no existe."""
    status_http = 404


class ConflictError(ErrorReserva):
    """Violación de unicidad o de integridad referencial."""
    status_http = 409


class TiempoAgotadoError(ErrorReserva):
    """La base de datos canceló la operación por exceder el tiempo asignado."""
    status_http = 503
