"""
--------------------------------------------------------------------------------
Integrantes:           Matias Pinilla, Herna Leris, Kassandra Ramos
Fecha de Modificación: 19/10/2026
Descripción:           Resolución de la identidad del llamador. El núcleo la
                       recibe como un string opaco; aquí se obtiene desde la
                       request (usuario autenticado) o desde la configuración.
--------------------------------------------------------------------------------
"""
from django.conf import settings
from django.contrib.auth import get_user_model


def usuario_de(request) -> str:
    """
    Devuelve el username del usuario autenticado o, si no hay sesión,
    el usuario por defecto configurado (USUARIO_POR_DEFECTO).
    """
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user.get_username()
    return settings.USUARIO_POR_DEFECTO


def nombre_visible(identidad: str) -> str:
    """
    Nombre legible para una identidad. Si corresponde a un usuario Django
    se usa su nombre completo; en otro caso se devuelve la identidad tal cual.
    """
    if not identidad:
        return ""
    User = get_user_model()
    usuario = User.objects.filter(**{User.USERNAME_FIELD: identidad}).first()
    if usuario is None:
        return identidad
    return usuario.get_full_name() or identidad
