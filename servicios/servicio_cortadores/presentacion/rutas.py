# servicios/servicio_cortadores/presentacion/rutas.py
import logging

from flask import Blueprint, request, jsonify, current_app

from decorators import token_required, admin_required
from servicios.servicio_cortadores.infraestructura.persistencia.sqlalchemy_repositorio_cortador import SQLAlchemyRepositorioCortador

logger = logging.getLogger(__name__)

cortadores_bp = Blueprint('cortadores_bp', __name__, url_prefix='/api/cortadores')


def configurar_cortadores(app, session_factory):
    app.extensions['servicio_cortadores'] = SQLAlchemyRepositorioCortador(session_factory)


def _repo() -> SQLAlchemyRepositorioCortador:
    return current_app.extensions['servicio_cortadores']


@cortadores_bp.get('')
@token_required
def listar_cortadores():
    try:
        cortadores = _repo().listar()
    except Exception:
        logger.exception("Error al obtener cortadores")
        return jsonify({"error": "Error al obtener cortadores"}), 500
    return jsonify([c.to_dict() for c in cortadores]), 200


@cortadores_bp.post('')
@token_required
@admin_required
def crear_cortador():
    data = request.get_json(silent=True) or {}
    try:
        _repo().crear(data.get('nombre'))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Error al crear cortador")
        return jsonify({"error": "Error al crear cortador"}), 500
    return jsonify({"message": "Cortador creado exitosamente"}), 201


@cortadores_bp.delete('/<int:cortador_id>')
@token_required
@admin_required
def eliminar_cortador(cortador_id: int):
    try:
        _repo().eliminar(cortador_id)
    except Exception:
        logger.exception("Error al eliminar cortador")
        return jsonify({"error": "Error al eliminar cortador"}), 500
    return jsonify({"message": "Cortador eliminado exitosamente"}), 200
