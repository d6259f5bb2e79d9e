import logging

from flask import Blueprint, request, jsonify, current_app, g

from decorators import token_required
from servicios.servicio_pedidos.aplicacion.casos_uso.crear_pedido import CrearPedido
from servicios.servicio_pedidos.aplicacion.casos_uso.actualizar_pedido import ActualizarPedido
from servicios.servicio_pedidos.aplicacion.casos_uso.eliminar_pedido import EliminarPedido
from servicios.servicio_pedidos.aplicacion.casos_uso.listar_pedidos import ListarPedidos
from servicios.servicio_pedidos.dominio.excepciones import DatosDePedidoInvalidosError, PedidoNoEncontradoError
from servicios.servicio_pedidos.infraestructura.persistencia.sqlalchemy_repositorio_pedido import SQLAlchemyRepositorioPedido

logger = logging.getLogger(__name__)

# Crear el Blueprint de Pedidos
pedidos_bp = Blueprint('pedidos_bp', __name__, url_prefix='/api')


def configurar_pedidos(app, session_factory, notificador, repositorio=None):
    """
    Inyecta las dependencias (datastore y canal de avisos) en los Casos de Uso
    y los deja en app.extensions para que las rutas los usen.
    """
    repositorio = repositorio or SQLAlchemyRepositorioPedido(session_factory)
    app.extensions['servicio_pedidos'] = {
        'crear': CrearPedido(repositorio=repositorio, notificador=notificador),
        'actualizar': ActualizarPedido(repositorio=repositorio, notificador=notificador),
        'eliminar': EliminarPedido(repositorio=repositorio, notificador=notificador),
        'listar': ListarPedidos(repositorio=repositorio),
    }


def _casos_uso() -> dict:
    return current_app.extensions['servicio_pedidos']


def _listar():
    try:
        pedidos = _casos_uso()['listar'].ejecutar()
        return jsonify([p.to_dict() for p in pedidos]), 200
    except Exception:
        logger.exception("Error al obtener pedidos")
        return jsonify({"error": "Error al obtener pedidos"}), 500


@pedidos_bp.route('/pedidos', methods=['GET'])
@token_required
def listar_pedidos():
    return _listar()


@pedidos_bp.route('/pedidos-publicos', methods=['GET'])
def listar_pedidos_publicos():
    """Misma lista que /pedidos pero sin autenticación (pantalla del taller)."""
    return _listar()


@pedidos_bp.route('/pedidos', methods=['POST'])
@token_required
def crear_pedido():
    try:
        pedido = _casos_uso()['crear'].ejecutar(request.get_json(silent=True))
    except DatosDePedidoInvalidosError as e:
        return jsonify({"error": e.mensaje}), 400
    except Exception:
        logger.exception("Error al crear el pedido")
        return jsonify({"error": "Error al crear el pedido"}), 500
    return jsonify(pedido.to_dict()), 201


@pedidos_bp.route('/pedidos/<int:pedido_id>', methods=['PUT'])
@token_required
def actualizar_pedido(pedido_id: int):
    try:
        pedido = _casos_uso()['actualizar'].ejecutar(
            pedido_id,
            request.get_json(silent=True),
            rol=g.usuario.get('role'),
        )
    except DatosDePedidoInvalidosError as e:
        return jsonify({"error": e.mensaje}), 400
    except PedidoNoEncontradoError as e:
        return jsonify({"error": e.mensaje}), 404
    except Exception:
        logger.exception("Error al actualizar el pedido %s", pedido_id)
        return jsonify({"error": "Error al actualizar el pedido"}), 500
    return jsonify(pedido.to_dict()), 200


@pedidos_bp.route('/pedidos/<int:pedido_id>', methods=['DELETE'])
@token_required
def eliminar_pedido(pedido_id: int):
    try:
        _casos_uso()['eliminar'].ejecutar(pedido_id)
    except Exception:
        logger.exception("Error al eliminar el pedido %s", pedido_id)
        return jsonify({"error": "Error al eliminar el pedido"}), 500
    return jsonify({"message": "Pedido eliminado exitosamente"}), 200
