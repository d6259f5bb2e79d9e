class ExcepcionDominio(Exception):
    """Clase base para todas las excepciones de dominio de pedidos."""
    pass


class PedidoNoEncontradoError(ExcepcionDominio):
    """Excepción lanzada cuando se intenta actualizar un pedido que no existe."""
    def __init__(self, mensaje="Pedido no encontrado"):
        self.mensaje = mensaje
        super().__init__(self.mensaje)


class DatosDePedidoInvalidosError(ExcepcionDominio):
    """Excepción lanzada cuando los datos de entrada de un pedido son inválidos."""
    def __init__(self, mensaje="Los datos del pedido son inválidos."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)
