# app.py
from flask import Flask, jsonify, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
import logging

from configuracion import Config
from extensiones import socketio
from inicializar_db import get_engine_and_session, inicializar_base_datos
from servicios.servicio_autenticacion.presentacion.rutas import auth_bp, configurar_autenticacion
from servicios.servicio_cortadores.presentacion.rutas import cortadores_bp, configurar_cortadores
from servicios.servicio_pedidos.presentacion.rutas import pedidos_bp, configurar_pedidos
from servicios.servicio_pedidos.presentacion.eventos import registrar_eventos
from servicios.servicio_pedidos.infraestructura.notificaciones.socketio_notificador import SocketIONotificador


def _configurar_logging(nivel: str) -> None:
    # basicConfig no hace nada si el root ya tiene handlers (gunicorn, pytest)
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, nivel, logging.INFO))


def crear_app(config_overrides=None, notificador=None):
    """
    Fábrica de la aplicación.
    - config_overrides: dict que pisa valores de Config (p.ej. la URI de la base en tests).
    - notificador: reemplaza el canal Socket.IO (tests).
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    app.json.ensure_ascii = False
    # Permite acceder con y sin "/" al final sin redirigir
    app.url_map.strict_slashes = False

    _configurar_logging(app.config.get("LOG_LEVEL", "INFO"))

    # CORS: "*" o lista separada por comas
    cors_env = app.config.get("CORS_ORIGINS", "*")
    allowed = [o.strip() for o in cors_env.split(",") if o.strip()] if cors_env and cors_env != "*" else "*"
    CORS(app, resources={r"/api/*": {"origins": allowed}})
    socketio.init_app(app, cors_allowed_origins=allowed)

    # Datastore: un engine con pool fijo por app
    engine, SessionLocal = get_engine_and_session(
        app.config["SQLALCHEMY_DATABASE_URI"],
        pool_size=app.config.get("DB_POOL_SIZE"),
        max_overflow=app.config.get("DB_MAX_OVERFLOW"),
        pool_timeout=app.config.get("DB_POOL_TIMEOUT"),
    )
    inicializar_base_datos(
        engine,
        SessionLocal,
        admin_username=app.config.get("ADMIN_USERNAME"),
        admin_password=app.config.get("ADMIN_PASSWORD"),
    )
    app.extensions["db_engine"] = engine

    # Dependencias inyectadas en cada servicio
    configurar_autenticacion(app, SessionLocal)
    configurar_cortadores(app, SessionLocal)
    configurar_pedidos(app, SessionLocal, notificador or SocketIONotificador(socketio))
    registrar_eventos(socketio)

    # Blueprints
    app.register_blueprint(auth_bp)          # /api/register, /api/login, /api/users
    app.register_blueprint(cortadores_bp)    # /api/cortadores
    app.register_blueprint(pedidos_bp)       # /api/pedidos, /api/pedidos-publicos

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    @app.errorhandler(404)
    def pagina_no_encontrada(_error):
        return jsonify({"error": "Ruta no encontrada"}), 404

    @app.errorhandler(Exception)
    def _unhandled(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        current_app.logger.exception("Unhandled")
        return jsonify({"error": "Error interno del servidor"}), 500

    return app


create_app = crear_app

if __name__ == "__main__":
    app = crear_app()
    logging.getLogger(__name__).info("Servidor corriendo en el puerto %s", app.config["PORT"])
    socketio.run(app, host="0.0.0.0", port=app.config["PORT"], allow_unsafe_werkzeug=True)
