# servicios/servicio_cortadores/dominio/cortador.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class Cortador:
    """Trabajador asignable a un pedido. Los pedidos lo guardan por nombre."""
    nombre: str
    id: Optional[int] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "nombre": self.nombre}
