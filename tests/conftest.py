import pytest

from app import crear_app
from extensiones import socketio
from inicializar_db import Base, get_engine_and_session
from servicios.servicio_pedidos.aplicacion.servicios.notificador_interface import INotificadorPedidos
from servicios.servicio_pedidos.infraestructura.persistencia.sqlalchemy_repositorio_pedido import SQLAlchemyRepositorioPedido
from utils.jwt import create_jwt

SECRETO = "secreto-de-pruebas"


class NotificadorFalso(INotificadorPedidos):
    """Guarda los avisos en memoria para inspeccionarlos."""

    def __init__(self):
        self.listas = 0
        self.descriptivos = []

    def pedidos_actualizados(self) -> None:
        self.listas += 1

    def pedido_actualizado(self, pedido_id, cambio, pedido) -> None:
        self.descriptivos.append({"id": pedido_id, "cambio": cambio, "pedido": pedido})


@pytest.fixture
def db_uri(tmp_path):
    return f"sqlite:///{tmp_path / 'vidrieria_test.sqlite'}"


@pytest.fixture
def session_factory(db_uri):
    engine, SessionLocal = get_engine_and_session(db_uri)
    Base.metadata.create_all(engine)
    yield SessionLocal
    engine.dispose()


@pytest.fixture
def repo(session_factory):
    return SQLAlchemyRepositorioPedido(session_factory)


@pytest.fixture
def notificador():
    return NotificadorFalso()


def _config(db_uri):
    return {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": db_uri,
        "JWT_SECRET": SECRETO,
        "JWT_EXPIRES_IN": 3600,
        # Sin admin inicial aunque el entorno lo defina
        "ADMIN_USERNAME": "",
        "ADMIN_PASSWORD": "",
    }


@pytest.fixture
def app(db_uri, notificador):
    app = crear_app(_config(db_uri), notificador=notificador)
    yield app
    app.extensions["db_engine"].dispose()


@pytest.fixture
def app_socketio(db_uri):
    """App con el notificador real sobre Socket.IO."""
    app = crear_app(_config(db_uri))
    yield app
    app.extensions["db_engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app_socketio):
    sio = socketio.test_client(app_socketio)
    yield sio
    if sio.is_connected():
        sio.disconnect()


def token_para(role="admin", id=1, username="tester"):
    return create_jwt({"id": id, "username": username, "role": role}, SECRETO, expires_in=3600)


def headers(role="admin", **kwargs):
    return {"Authorization": f"Bearer {token_para(role, **kwargs)}"}
