# servicios/servicio_pedidos/aplicacion/casos_uso/crear_pedido.py

from servicios.servicio_pedidos.dominio.pedido import Pedido, NuevoPedido
from servicios.servicio_pedidos.aplicacion.repositorios.repositorio_pedido_interface import IRepositorioPedido
from servicios.servicio_pedidos.aplicacion.servicios.notificador_interface import INotificadorPedidos


class CrearPedido:
    """
    Crea un pedido con su lista inicial de productos (puede estar vacía)
    y avisa a los clientes conectados que la lista de pedidos cambió.
    """
    def __init__(self, repositorio: IRepositorioPedido, notificador: INotificadorPedidos):
        self.repositorio = repositorio
        self.notificador = notificador

    def ejecutar(self, data: dict) -> Pedido:
        """
        :raises DatosDePedidoInvalidosError: si faltan campos o los productos no son válidos.
        """
        nuevo = NuevoPedido.desde_dict(data)

        # Transacción única: si falla cualquier inserción no queda nada guardado
        pedido = self.repositorio.crear(nuevo)

        self.notificador.pedidos_actualizados()
        return pedido
