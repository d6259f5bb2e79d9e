# servicios/servicio_autenticacion/presentacion/rutas.py

import logging

from flask import Blueprint, request, jsonify, current_app
from passlib.hash import pbkdf2_sha256 as pwd_context

# Importamos las clases de Caso de Uso
from servicios.servicio_autenticacion.aplicacion.casos_uso.registrar_usuario import RegistrarUsuario
from servicios.servicio_autenticacion.aplicacion.casos_uso.iniciar_sesion import IniciarSesion
from servicios.servicio_autenticacion.aplicacion.casos_uso.cambiar_password import CambiarPassword

# Importamos la implementacion del Repositorio
from servicios.servicio_autenticacion.infraestructura.persistencia.sqlalchemy_repositorio_usuario import SQLAlchemyRepositorioUsuario
from decorators import token_required, admin_required
from utils.jwt import create_jwt

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# INICIALIZACION Y BLUEPRINT
# ----------------------------------------------------------------------
auth_bp = Blueprint('auth_bp', __name__, url_prefix='/api')


def configurar_autenticacion(app, session_factory, hasher=pwd_context):
    """Se inyectan las dependencias en los Casos de Uso."""
    repositorio_usuario = SQLAlchemyRepositorioUsuario(session_factory)

    def emitir_token(claims: dict) -> str:
        return create_jwt(
            claims,
            secret=app.config.get("JWT_SECRET", ""),
            expires_in=app.config.get("JWT_EXPIRES_IN", 0),
        )

    app.extensions['servicio_autenticacion'] = {
        'repositorio': repositorio_usuario,
        'registrar': RegistrarUsuario(repositorio=repositorio_usuario, hasher=hasher),
        'iniciar_sesion': IniciarSesion(repositorio=repositorio_usuario, hasher=hasher, emitir_token=emitir_token),
        'cambiar_password': CambiarPassword(repositorio=repositorio_usuario, hasher=hasher),
    }


def _uc(nombre: str):
    return current_app.extensions['servicio_autenticacion'][nombre]


def _crear_usuario(mensaje_error: str):
    data = request.get_json(silent=True) or {}
    try:
        _uc('registrar').ejecutar(
            username=data.get('username'),
            password=data.get('password'),
            role=data.get('role'),
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception(mensaje_error)
        return jsonify({"error": mensaje_error}), 500
    return jsonify({"message": "Usuario creado exitosamente"}), 201


# ----------------------------------------------------------------------
# RUTAS DE AUTENTICACION
# ----------------------------------------------------------------------
@auth_bp.route('/register', methods=['POST'])
def register():
    return _crear_usuario("Error al crear el usuario")


@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    try:
        token, usuario = _uc('iniciar_sesion').ejecutar(
            username=data.get('username'),
            password=data.get('password'),
        )
    except ValueError as e:
        # Usuario inexistente o contraseña incorrecta
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Error al iniciar sesión")
        return jsonify({"error": "Error al iniciar sesión"}), 500
    return jsonify({"token": token, "role": usuario.role}), 200


# ----------------------------------------------------------------------
# ADMINISTRACION DE USUARIOS (sólo admin)
# ----------------------------------------------------------------------
@auth_bp.route('/users', methods=['GET'])
@token_required
@admin_required
def listar_usuarios():
    try:
        usuarios = _uc('repositorio').listar()
    except Exception:
        logger.exception("Error al obtener usuarios")
        return jsonify({"error": "Error al obtener usuarios"}), 500
    return jsonify([u.to_dict() for u in usuarios]), 200


@auth_bp.route('/users', methods=['POST'])
@token_required
@admin_required
def crear_usuario():
    return _crear_usuario("Error al crear usuario")


@auth_bp.route('/users/<int:id_usuario>/password', methods=['PUT'])
@token_required
@admin_required
def cambiar_password(id_usuario: int):
    data = request.get_json(silent=True) or {}
    try:
        if not _uc('cambiar_password').ejecutar(id_usuario, data.get('newPassword')):
            logger.warning("Cambio de contraseña para usuario inexistente: %s", id_usuario)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Error al actualizar contraseña")
        return jsonify({"error": "Error al actualizar contraseña"}), 500
    return jsonify({"message": "Contraseña actualizada exitosamente"}), 200


@auth_bp.route('/users/<int:id_usuario>', methods=['DELETE'])
@token_required
@admin_required
def eliminar_usuario(id_usuario: int):
    try:
        _uc('repositorio').eliminar(id_usuario)
    except Exception:
        logger.exception("Error al eliminar usuario")
        return jsonify({"error": "Error al eliminar usuario"}), 500
    return jsonify({"message": "Usuario eliminado exitosamente"}), 200
