# servicios/servicio_autenticacion/aplicacion/casos_uso/registrar_usuario.py

from typing import Optional

# Importamos las dependencias
from servicios.servicio_autenticacion.dominio.usuario import Usuario, ROL_CORTADOR
from servicios.servicio_autenticacion.aplicacion.repositorios.repositorio_usuario_interface import IRepositorioUsuario


# ==============================================================================
# CASO DE USO: REGISTRAR USUARIO
# Lo usan tanto /api/register (público) como /api/users (admin).
# ==============================================================================
class RegistrarUsuario:
    """
    Caso de Uso responsable de registrar un nuevo usuario en el sistema.
    """
    def __init__(self, repositorio: IRepositorioUsuario, hasher):
        """
        Inyeccion de Dependencias:
        - repositorio: El contrato (interfaz) para acceder a la persistencia.
        - hasher: objeto con .hash() / .verify() (p.ej. passlib pbkdf2_sha256).
        """
        self.repositorio = repositorio
        self.hasher = hasher

    def ejecutar(self, username: str, password: str, role: Optional[str] = None) -> Usuario:
        """
        :raises ValueError: Si faltan datos o el username ya existe.
        :returns: La entidad Usuario recien creada.
        """
        username = str(username or "").strip()
        if not username or not isinstance(password, str) or not password:
            raise ValueError("Faltan campos requeridos (username, password).")

        if self.repositorio.username_existe(username):
            raise ValueError("El usuario ya existe")

        nuevo_usuario = Usuario(
            username=username,
            password_hash=self.hasher.hash(password),
            role=str(role).strip() if role else ROL_CORTADOR,
        )
        return self.repositorio.guardar_usuario(nuevo_usuario)
