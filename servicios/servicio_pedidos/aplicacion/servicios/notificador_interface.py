from abc import ABC, abstractmethod

from servicios.servicio_pedidos.dominio.pedido import Pedido


class INotificadorPedidos(ABC):
    """
    Contrato del canal de avisos en tiempo real hacia los clientes conectados.
    Es un broadcast: sin persistencia, sin reenvío y sin confirmación.
    Desacopla los Casos de Uso de la implementación concreta (Socket.IO, fake en tests).
    """

    @abstractmethod
    def pedidos_actualizados(self) -> None:
        """Aviso sin payload: 'cambiaron los pedidos, volver a pedir la lista'."""
        raise NotImplementedError

    @abstractmethod
    def pedido_actualizado(self, pedido_id: int, cambio: str, pedido: Pedido) -> None:
        """
        Aviso descriptivo de un pedido concreto.

        Args:
            pedido_id (int): id del pedido modificado.
            cambio (str): mensaje legible para mostrar al usuario.
            pedido (Pedido): estado actual completo del pedido.
        """
        raise NotImplementedError
