# servicios/servicio_autenticacion/dominio/usuario.py

from dataclasses import dataclass
from typing import Optional

ROL_ADMIN = "admin"
ROL_CORTADOR = "cortador"


# ==============================================================================
# ENTIDAD DE DOMINIO: USUARIO
# Sólo se usa para autenticación; no se relaciona con los pedidos.
# ==============================================================================
@dataclass
class Usuario:
    username: str

    # Credenciales (la contraseña ya debe estar hasheada al llegar aqui)
    password_hash: str

    # 'admin' | 'cortador' | otro
    role: str = ROL_CORTADOR

    # Lo asigna la base de datos al insertar
    id: Optional[int] = None

    @property
    def es_admin(self) -> bool:
        return self.role == ROL_ADMIN

    def claims(self) -> dict:
        """Payload del token de identidad."""
        return {"id": self.id, "username": self.username, "role": self.role}

    def to_dict(self) -> dict:
        # Nunca se expone el hash
        return {"id": self.id, "username": self.username, "role": self.role}

    def __str__(self):
        return f"Usuario(ID: {self.id}, username: {self.username}, role: {self.role})"
