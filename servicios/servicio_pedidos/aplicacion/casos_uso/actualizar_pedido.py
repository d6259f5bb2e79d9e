# servicios/servicio_pedidos/aplicacion/casos_uso/actualizar_pedido.py

from typing import Optional

from servicios.servicio_pedidos.dominio.pedido import Pedido, CambiosPedido, productos_desde_lista
from servicios.servicio_pedidos.dominio.excepciones import DatosDePedidoInvalidosError
from servicios.servicio_pedidos.aplicacion.repositorios.repositorio_pedido_interface import IRepositorioPedido
from servicios.servicio_pedidos.aplicacion.servicios.notificador_interface import INotificadorPedidos

ROL_CORTADOR = "cortador"


def componer_mensaje_cambio(rol: Optional[str], cambios: CambiosPedido, pedido: Pedido) -> Optional[str]:
    """
    Devuelve el único mensaje descriptivo a emitir, o None.

    Reglas, evaluadas en orden (la última que aplica define el mensaje):
      1. Se envió un estado no vacío -> "Se ha actualizado el estado a ...".
      2. Rol distinto de 'cortador' y se envió un cortador no vacío
         -> "Se ha asignado al cortador ..." (reemplaza al mensaje de estado).
    Un usuario con rol 'cortador' nunca genera el mensaje de asignación.
    """
    prefijo = f"Pedido {pedido.numero_factura} - {pedido.cliente}"
    mensaje = None

    if cambios.estado:
        mensaje = f"{prefijo}: Se ha actualizado el estado a {cambios.estado}"

    if rol != ROL_CORTADOR and cambios.cortador:
        mensaje = f"{prefijo}: Se ha asignado al cortador {cambios.cortador}"

    return mensaje


class ActualizarPedido:
    """
    Actualización parcial de un pedido: sólo los campos enviados cambian y,
    si llega una lista de productos no vacía, reemplaza por completo a la anterior.
    """
    def __init__(self, repositorio: IRepositorioPedido, notificador: INotificadorPedidos):
        self.repositorio = repositorio
        self.notificador = notificador

    def ejecutar(self, pedido_id: int, data: dict, rol: Optional[str] = None) -> Pedido:
        """
        :raises DatosDePedidoInvalidosError: si el cuerpo no es válido.
        :raises PedidoNoEncontradoError: si el pedido no existe.
        """
        if not isinstance(data, dict):
            raise DatosDePedidoInvalidosError("Se esperaba un objeto JSON.")

        cambios = CambiosPedido.desde_dict(data)
        productos = productos_desde_lista(data.get("productos"))

        pedido = self.repositorio.actualizar(pedido_id, cambios, productos or None)

        self.notificador.pedidos_actualizados()

        mensaje = componer_mensaje_cambio(rol, cambios, pedido)
        if mensaje:
            self.notificador.pedido_actualizado(pedido.id, mensaje, pedido)

        return pedido
