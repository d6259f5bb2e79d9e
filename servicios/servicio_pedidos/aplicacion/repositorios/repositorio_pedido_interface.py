# servicios/servicio_pedidos/aplicacion/repositorios/repositorio_pedido_interface.py

from abc import ABC, abstractmethod
from typing import List, Optional
from servicios.servicio_pedidos.dominio.pedido import Pedido, NuevoPedido, CambiosPedido


# Contrato que debe cumplir cualquier persistencia de pedidos.
# Cada operación de escritura es una única transacción: el pedido y sus
# productos se guardan, reemplazan o borran juntos o no se toca nada.
class IRepositorioPedido(ABC):

    @abstractmethod
    def crear(self, nuevo: NuevoPedido) -> Pedido:
        """Inserta el pedido (fecha_ingreso la asigna el servidor) y sus productos."""
        pass

    @abstractmethod
    def actualizar(self, pedido_id: int, cambios: CambiosPedido, productos: Optional[list] = None) -> Pedido:
        """
        Aplica sólo los campos enviados y, si 'productos' no está vacío,
        reemplaza por completo los productos del pedido.

        :raises PedidoNoEncontradoError: si el pedido no existe.
        """
        pass

    @abstractmethod
    def eliminar(self, pedido_id: int) -> None:
        """Borra los productos y luego el pedido. Un id inexistente no es error."""
        pass

    @abstractmethod
    def listar(self) -> List[Pedido]:
        """Todos los pedidos, el más reciente primero, cada uno con sus productos."""
        pass
