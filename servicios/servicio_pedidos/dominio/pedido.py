# servicios/servicio_pedidos/dominio/pedido.py

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from servicios.servicio_pedidos.dominio.excepciones import DatosDePedidoInvalidosError

ESTADO_INICIAL = "pendiente"

_SOLO_FECHA = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ==============================================================================
# Helpers de conversión
# ==============================================================================
def _texto(valor: Any, campo: str, requerido: bool = True) -> Optional[str]:
    if valor is None:
        if requerido:
            raise DatosDePedidoInvalidosError(f"El campo '{campo}' es requerido.")
        return None
    if not isinstance(valor, (str, int, float)) or isinstance(valor, bool):
        raise DatosDePedidoInvalidosError(f"El campo '{campo}' debe ser texto.")
    texto = str(valor).strip()
    if requerido and not texto:
        raise DatosDePedidoInvalidosError(f"El campo '{campo}' es requerido.")
    return texto


def _numero(valor: Any, campo: str) -> float:
    if valor is None or valor == "":
        return 0.0
    if isinstance(valor, bool):
        raise DatosDePedidoInvalidosError(f"El campo '{campo}' debe ser numérico.")
    try:
        numero = float(valor)
    except (TypeError, ValueError):
        raise DatosDePedidoInvalidosError(f"El campo '{campo}' debe ser numérico.")
    # NaN e infinito no tienen representación en JSON
    if not math.isfinite(numero):
        raise DatosDePedidoInvalidosError(f"El campo '{campo}' debe ser un número finito.")
    return numero


def _entero(valor: Any, campo: str) -> int:
    numero = _numero(valor, campo)
    if not numero.is_integer():
        raise DatosDePedidoInvalidosError(f"El campo '{campo}' debe ser un entero.")
    return int(numero)


def parse_fecha(valor: Any) -> Optional[date]:
    """Acepta 'YYYY-MM-DD' (o un ISO datetime, del que toma la fecha)."""
    if valor is None or valor == "":
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str):
        raise DatosDePedidoInvalidosError("'fecha_entrega' debe ser una fecha ISO (YYYY-MM-DD).")
    texto = valor.strip()
    try:
        if _SOLO_FECHA.match(texto):
            return date.fromisoformat(texto)
        return datetime.fromisoformat(re.sub(r"Z$", "+00:00", texto)).date()
    except ValueError:
        raise DatosDePedidoInvalidosError("'fecha_entrega' debe ser una fecha ISO (YYYY-MM-DD).")


# ==============================================================================
# ENTIDAD PRODUCTO PEDIDO (línea del pedido)
# ==============================================================================
@dataclass
class ProductoPedido:
    """Un corte de vidrio dentro de un pedido. No tiene ciclo de vida propio."""
    descripcion: str
    cantidad: int = 1
    ingreso: float = 0.0
    egreso: float = 0.0
    total: float = 0.0
    id: Optional[int] = None
    pedido_id: Optional[int] = None

    @classmethod
    def desde_dict(cls, data: Any) -> "ProductoPedido":
        if not isinstance(data, dict):
            raise DatosDePedidoInvalidosError("Cada producto debe ser un objeto.")
        return cls(
            descripcion=_texto(data.get("descripcion"), "descripcion"),
            cantidad=_entero(data.get("cantidad", 1), "cantidad"),
            ingreso=_numero(data.get("ingreso"), "ingreso"),
            egreso=_numero(data.get("egreso"), "egreso"),
            total=_numero(data.get("total"), "total"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pedido_id": self.pedido_id,
            "descripcion": self.descripcion,
            "cantidad": self.cantidad,
            "ingreso": self.ingreso,
            "egreso": self.egreso,
            "total": self.total,
        }


def productos_desde_lista(data: Any) -> List[ProductoPedido]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise DatosDePedidoInvalidosError("'productos' debe ser una lista.")
    return [ProductoPedido.desde_dict(p) for p in data]


# ==============================================================================
# ENTIDAD PEDIDO
# ==============================================================================
@dataclass
class Pedido:
    """Trabajo de un cliente: factura, fechas, estado, cortador asignado y productos."""
    id: int
    numero_factura: str
    cliente: str
    fecha_ingreso: datetime
    fecha_entrega: Optional[date] = None
    estado: str = ESTADO_INICIAL
    cortador: Optional[str] = None
    productos: List[ProductoPedido] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "numero_factura": self.numero_factura,
            "cliente": self.cliente,
            "fecha_ingreso": self.fecha_ingreso.isoformat() if self.fecha_ingreso else None,
            "fecha_entrega": self.fecha_entrega.isoformat() if self.fecha_entrega else None,
            "estado": self.estado,
            "cortador": self.cortador,
            "productos": [p.to_dict() for p in self.productos],
        }


@dataclass
class NuevoPedido:
    """Datos de entrada para crear un pedido con sus productos iniciales."""
    numero_factura: str
    cliente: str
    fecha_entrega: Optional[date] = None
    productos: List[ProductoPedido] = field(default_factory=list)

    @classmethod
    def desde_dict(cls, data: Any) -> "NuevoPedido":
        if not isinstance(data, dict):
            raise DatosDePedidoInvalidosError("Se esperaba un objeto JSON.")
        return cls(
            numero_factura=_texto(data.get("numero_factura"), "numero_factura"),
            cliente=_texto(data.get("cliente"), "cliente"),
            fecha_entrega=parse_fecha(data.get("fecha_entrega")),
            productos=productos_desde_lista(data.get("productos")),
        )


# ==============================================================================
# CAMBIOS PARCIALES
# ==============================================================================
class _NoEnviado:
    def __repr__(self):
        return "NO_ENVIADO"

    def __bool__(self):
        return False


NO_ENVIADO: Any = _NoEnviado()

CAMPOS_ACTUALIZABLES = ("numero_factura", "cliente", "fecha_entrega", "estado", "cortador")


@dataclass(frozen=True)
class CambiosPedido:
    """
    Conjunto cerrado de columnas actualizables. Cada campo vale NO_ENVIADO si el
    cliente no lo mandó; sólo los campos enviados se escriben en la base de datos.
    """
    numero_factura: Any = NO_ENVIADO
    cliente: Any = NO_ENVIADO
    fecha_entrega: Any = NO_ENVIADO
    estado: Any = NO_ENVIADO
    cortador: Any = NO_ENVIADO

    @classmethod
    def desde_dict(cls, data: Dict[str, Any]) -> "CambiosPedido":
        valores = {}
        if "numero_factura" in data:
            valores["numero_factura"] = _texto(data["numero_factura"], "numero_factura")
        if "cliente" in data:
            valores["cliente"] = _texto(data["cliente"], "cliente")
        if "fecha_entrega" in data:
            valores["fecha_entrega"] = parse_fecha(data["fecha_entrega"])
        if "estado" in data:
            valores["estado"] = _texto(data["estado"], "estado")
        if "cortador" in data:
            # null (o "") desasigna el cortador
            valores["cortador"] = _texto(data["cortador"], "cortador", requerido=False) or None
        return cls(**valores)

    def campos(self) -> Dict[str, Any]:
        """Sólo los campos enviados, en orden estable."""
        return {
            nombre: getattr(self, nombre)
            for nombre in CAMPOS_ACTUALIZABLES
            if getattr(self, nombre) is not NO_ENVIADO
        }

    @property
    def vacio(self) -> bool:
        return not self.campos()
