# servicios/servicio_pedidos/infraestructura/notificaciones/socketio_notificador.py

import logging

from servicios.servicio_pedidos.aplicacion.servicios.notificador_interface import INotificadorPedidos
from servicios.servicio_pedidos.dominio.pedido import Pedido

logger = logging.getLogger(__name__)

EVENTO_LISTA = "actualizacionPedidos"
EVENTO_PEDIDO = "pedidoActualizado"


class SocketIONotificador(INotificadorPedidos):
    """
    Implementación de INotificadorPedidos sobre Flask-SocketIO.
    Emite a todos los clientes conectados en el namespace por defecto.

    Se llama después del commit: si el envío falla el cambio ya está guardado,
    así que el error se registra y la petición HTTP sigue su curso.
    """

    def __init__(self, socketio):
        self.socketio = socketio

    def _emitir(self, evento: str, *args) -> None:
        try:
            self.socketio.emit(evento, *args)
        except Exception:
            logger.exception("No se pudo emitir el evento %s", evento)

    def pedidos_actualizados(self) -> None:
        self._emitir(EVENTO_LISTA)

    def pedido_actualizado(self, pedido_id: int, cambio: str, pedido: Pedido) -> None:
        logger.info("Pedido %s: %s", pedido_id, cambio)
        self._emitir(EVENTO_PEDIDO, {
            "id": pedido_id,
            "cambio": cambio,
            "pedido": pedido.to_dict(),
        })
