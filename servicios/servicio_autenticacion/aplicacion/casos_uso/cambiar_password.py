# servicios/servicio_autenticacion/aplicacion/casos_uso/cambiar_password.py

from servicios.servicio_autenticacion.aplicacion.repositorios.repositorio_usuario_interface import IRepositorioUsuario


class CambiarPassword:
    """Un admin reemplaza la contraseña de cualquier usuario."""
    def __init__(self, repositorio: IRepositorioUsuario, hasher):
        self.repositorio = repositorio
        self.hasher = hasher

    def ejecutar(self, id_usuario: int, nueva_password: str) -> bool:
        """
        :raises ValueError: si no llega la nueva contraseña.
        :returns: False si el usuario no existe.
        """
        if not nueva_password:
            raise ValueError("Falta la nueva contraseña (newPassword).")
        return self.repositorio.actualizar_password(id_usuario, self.hasher.hash(nueva_password))
