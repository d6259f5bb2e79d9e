# inicializar_db.py

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import (
    create_engine,
    event,
    Column,
    Integer,
    String,
    Float,
    Date,
    DateTime,
    ForeignKey,
)
from sqlalchemy.orm import sessionmaker, declarative_base, relationship
from sqlalchemy.exc import SQLAlchemyError

from configuracion import Config

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Base ORM
# ----------------------------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------------------------
# Modelos ORM
# ----------------------------------------------------------------------
class UsuarioORM(Base):
    """
    Tabla de usuarios para autenticación.
    - username: único
    - password: hash pbkdf2_sha256 (passlib)
    - role: 'admin' | 'cortador' | otro
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="cortador")


class CortadorORM(Base):
    """Trabajadores que cortan el vidrio. Los pedidos los referencian por nombre."""
    __tablename__ = "cortadores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)


class PedidoORM(Base):
    __tablename__ = "pedidos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    numero_factura = Column(String(50), nullable=False)
    cliente = Column(String(150), nullable=False)
    fecha_ingreso = Column(DateTime, nullable=False, index=True)
    fecha_entrega = Column(Date, nullable=True)
    estado = Column(String(50), nullable=False, default="pendiente")
    # Referencia textual, sin FK: un cortador puede borrarse y seguir en pedidos viejos
    cortador = Column(String(100), nullable=True)

    productos = relationship(
        "ProductoPedidoORM",
        order_by="ProductoPedidoORM.id",
        passive_deletes=True,
    )


class ProductoPedidoORM(Base):
    __tablename__ = "productos_pedido"

    id = Column(Integer, primary_key=True, autoincrement=True)
    pedido_id = Column(Integer, ForeignKey("pedidos.id"), nullable=False, index=True)
    descripcion = Column(String(255), nullable=False)
    cantidad = Column(Integer, nullable=False, default=1)
    ingreso = Column(Float, nullable=False, default=0.0)
    egreso = Column(Float, nullable=False, default=0.0)
    total = Column(Float, nullable=False, default=0.0)


# ----------------------------------------------------------------------
# Helpers DB
# ----------------------------------------------------------------------
def resolve_db_uri() -> str:
    """
    Devuelve la URI de la base de datos a usar (Config.SQLALCHEMY_DATABASE_URI).
    Si es SQLite en archivo, se asegura de que la carpeta exista.
    """
    db_uri = Config.SQLALCHEMY_DATABASE_URI
    if db_uri.startswith("sqlite:///"):
        sqlite_file = Path(db_uri.replace("sqlite:///", "", 1))
        sqlite_file.parent.mkdir(parents=True, exist_ok=True)
    return db_uri


def _sqlite_al_conectar(dbapi_conn, _record):
    # El driver no emite BEGIN por su cuenta; lo hace _sqlite_begin
    dbapi_conn.isolation_level = None
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _sqlite_begin(conn):
    # Toma el lock de escritura al empezar: las transacciones concurrentes esperan
    # su turno (busy timeout) en vez de fallar con "database is locked"
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def get_engine_and_session(
    db_uri: str,
    pool_size: int | None = None,
    max_overflow: int | None = None,
    pool_timeout: int | None = None,
):
    """
    Crea el engine y la fábrica de sesiones.
    Para bases de datos de servidor el pool es de tamaño fijo: cuando se agota,
    la petición espera (hasta pool_timeout) a que se libere una conexión.
    """
    kwargs = {}
    if db_uri.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": 15}
    else:
        kwargs.update(
            pool_size=pool_size if pool_size is not None else Config.DB_POOL_SIZE,
            max_overflow=max_overflow if max_overflow is not None else Config.DB_MAX_OVERFLOW,
            pool_timeout=pool_timeout if pool_timeout is not None else Config.DB_POOL_TIMEOUT,
            pool_pre_ping=True,
        )

    engine = create_engine(db_uri, echo=False, future=True, **kwargs)
    if db_uri.startswith("sqlite"):
        event.listen(engine, "connect", _sqlite_al_conectar)
        event.listen(engine, "begin", _sqlite_begin)

    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    return engine, SessionLocal


# ----------------------------------------------------------------------
# Inicialización
# ----------------------------------------------------------------------
def crear_admin_inicial(SessionLocal, username: str | None, password: str | None, hasher) -> bool:
    """Inserta un usuario admin si se configuró y todavía no existe."""
    if not username or not password:
        return False

    session = SessionLocal()
    try:
        if session.query(UsuarioORM).filter_by(username=username).count() > 0:
            return False
        session.add(UsuarioORM(username=username, password=hasher.hash(password), role="admin"))
        session.commit()
        logger.info("Usuario admin inicial creado: %s", username)
        return True
    except SQLAlchemyError:
        session.rollback()
        logger.exception("No se pudo crear el usuario admin inicial")
        raise
    finally:
        session.close()


def inicializar_base_datos(engine=None, SessionLocal=None, admin_username=None, admin_password=None):
    """
    Crea tablas si no existen e inserta el admin inicial (ADMIN_USERNAME/ADMIN_PASSWORD).
    """
    from passlib.hash import pbkdf2_sha256

    if engine is None or SessionLocal is None:
        engine, SessionLocal = get_engine_and_session(resolve_db_uri())

    Base.metadata.create_all(engine)
    logger.info("Tablas creadas/verificadas en: %s", engine.url.render_as_string(hide_password=True))

    if admin_username is None:
        admin_username, admin_password = Config.ADMIN_USERNAME, Config.ADMIN_PASSWORD

    crear_admin_inicial(
        SessionLocal,
        admin_username,
        admin_password,
        pbkdf2_sha256,
    )
    return engine, SessionLocal


if __name__ == "__main__":
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    inicializar_base_datos()
