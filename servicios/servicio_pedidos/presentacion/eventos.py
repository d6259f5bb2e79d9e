import logging

logger = logging.getLogger(__name__)


def registrar_eventos(socketio) -> None:
    """Canal push: no hay eventos de negocio cliente -> servidor, sólo conexión."""

    @socketio.on('connect')
    def _conectado(auth=None):
        logger.info("Nuevo cliente conectado")

    @socketio.on('disconnect')
    def _desconectado(reason=None):
        logger.info("Cliente desconectado")
