# servicios/servicio_pedidos/aplicacion/casos_uso/listar_pedidos.py

from dataclasses import dataclass
from typing import List

from servicios.servicio_pedidos.dominio.pedido import Pedido
from servicios.servicio_pedidos.aplicacion.repositorios.repositorio_pedido_interface import IRepositorioPedido


@dataclass
class ListarPedidos:
    """Lista completa (sin paginar), más recientes primero, cada pedido con sus productos."""
    repositorio: IRepositorioPedido

    def ejecutar(self) -> List[Pedido]:
        return self.repositorio.listar()
