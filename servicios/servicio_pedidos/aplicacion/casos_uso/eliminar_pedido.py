# servicios/servicio_pedidos/aplicacion/casos_uso/eliminar_pedido.py

from servicios.servicio_pedidos.aplicacion.repositorios.repositorio_pedido_interface import IRepositorioPedido
from servicios.servicio_pedidos.aplicacion.servicios.notificador_interface import INotificadorPedidos


class EliminarPedido:
    """Borra un pedido junto con sus productos. Borrar un id inexistente no es un error."""
    def __init__(self, repositorio: IRepositorioPedido, notificador: INotificadorPedidos):
        self.repositorio = repositorio
        self.notificador = notificador

    def ejecutar(self, pedido_id: int) -> None:
        self.repositorio.eliminar(pedido_id)
        self.notificador.pedidos_actualizados()
