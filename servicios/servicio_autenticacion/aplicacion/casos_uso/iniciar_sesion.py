# servicios/servicio_autenticacion/aplicacion/casos_uso/iniciar_sesion.py

from typing import Callable, Tuple

from servicios.servicio_autenticacion.dominio.usuario import Usuario
from servicios.servicio_autenticacion.aplicacion.repositorios.repositorio_usuario_interface import IRepositorioUsuario


# ==============================================================================
# CASO DE USO: INICIAR SESION
# ==============================================================================
class IniciarSesion:
    """
    Verifica credenciales y emite el token de identidad {id, username, role}.
    """
    def __init__(self, repositorio: IRepositorioUsuario, hasher, emitir_token: Callable[[dict], str]):
        self.repositorio = repositorio
        self.hasher = hasher
        self.emitir_token = emitir_token

    def ejecutar(self, username: str, password: str) -> Tuple[str, Usuario]:
        """
        :raises ValueError: Si el usuario no existe o la contraseña es incorrecta.
        :returns: (token, usuario autenticado)
        """
        if not username or not password:
            raise ValueError("Faltan campos requeridos (username, password).")

        usuario = self.repositorio.obtener_por_username(username)
        if not usuario:
            raise ValueError("Usuario no encontrado")

        if not self.hasher.verify(password, usuario.password_hash):
            raise ValueError("Contraseña incorrecta")

        return self.emitir_token(usuario.claims()), usuario
