# servicios/servicio_autenticacion/aplicacion/repositorios/repositorio_usuario_interface.py

from abc import ABC, abstractmethod
from typing import List, Optional

# Importamos la entidad del Dominio
from servicios.servicio_autenticacion.dominio.usuario import Usuario


# ==============================================================================
# INTERFAZ (Contrato)
# Define el contrato para cualquier adaptador de persistencia de Usuario.
# ==============================================================================
class IRepositorioUsuario(ABC):
    """
    Define los metodos CRUD necesarios para gestionar la entidad Usuario.
    La capa de Aplicacion dependera unicamente de esta interfaz (DIP).
    """

    @abstractmethod
    def obtener_por_username(self, username: str) -> Optional[Usuario]:
        """Busca un usuario por su nombre de usuario (usado en login y registro)."""
        pass

    @abstractmethod
    def username_existe(self, username: str) -> bool:
        pass

    @abstractmethod
    def guardar_usuario(self, usuario: Usuario) -> Usuario:
        """Inserta un usuario nuevo y lo devuelve con su id asignado."""
        pass

    @abstractmethod
    def listar(self) -> List[Usuario]:
        pass

    @abstractmethod
    def actualizar_password(self, id_usuario: int, password_hash: str) -> bool:
        """Retorna False si el usuario no existe."""
        pass

    @abstractmethod
    def eliminar(self, id_usuario: int) -> bool:
        """Retorna False si no había nada que borrar."""
        pass
