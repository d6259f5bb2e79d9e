# servicios/servicio_autenticacion/infraestructura/persistencia/sqlalchemy_repositorio_usuario.py

# ==============================================================================
# IMPORTACIONES CLAVE
# ==============================================================================
from typing import List, Optional

# Contrato de la capa de aplicación
from servicios.servicio_autenticacion.aplicacion.repositorios.repositorio_usuario_interface import IRepositorioUsuario

# Entidad de Dominio y ORM
from servicios.servicio_autenticacion.dominio.usuario import Usuario
from inicializar_db import UsuarioORM


# ==============================================================================
# IMPLEMENTACIÓN DEL REPOSITORIO DE USUARIO (INFRAESTRUCTURA)
# ==============================================================================
class SQLAlchemyRepositorioUsuario(IRepositorioUsuario):
    """
    Adaptador de persistencia que implementa IRepositorioUsuario con SQLAlchemy.
    Recibe la fábrica de sesiones ya configurada con el engine de la app.
    """

    def __init__(self, session_factory):
        self.Session = session_factory

    # --------------------------------------------------------------------------
    # Mapeo de la Entidad de Dominio <-> Modelo ORM
    # --------------------------------------------------------------------------
    def _map_to_domain(self, orm_usuario: UsuarioORM) -> Usuario:
        return Usuario(
            id=orm_usuario.id,
            username=orm_usuario.username,
            password_hash=orm_usuario.password,
            role=orm_usuario.role,
        )

    def _map_to_orm(self, domain_usuario: Usuario) -> UsuarioORM:
        return UsuarioORM(
            username=domain_usuario.username,
            password=domain_usuario.password_hash,
            role=domain_usuario.role,
        )

    # --------------------------------------------------------------------------
    # Implementación del Contrato IRepositorioUsuario
    # --------------------------------------------------------------------------
    def obtener_por_username(self, username: str) -> Optional[Usuario]:
        session = self.Session()
        try:
            orm_usuario = (
                session.query(UsuarioORM)
                .filter_by(username=username)
                .one_or_none()
            )
            return self._map_to_domain(orm_usuario) if orm_usuario else None
        finally:
            session.close()

    def username_existe(self, username: str) -> bool:
        session = self.Session()
        try:
            return session.query(UsuarioORM).filter_by(username=username).count() > 0
        finally:
            session.close()

    def guardar_usuario(self, usuario: Usuario) -> Usuario:
        session = self.Session()
        try:
            orm_usuario = self._map_to_orm(usuario)
            session.add(orm_usuario)
            session.commit()
            return self._map_to_domain(orm_usuario)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def listar(self) -> List[Usuario]:
        session = self.Session()
        try:
            rows = session.query(UsuarioORM).order_by(UsuarioORM.id).all()
            return [self._map_to_domain(r) for r in rows]
        finally:
            session.close()

    def actualizar_password(self, id_usuario: int, password_hash: str) -> bool:
        session = self.Session()
        try:
            actualizados = (
                session.query(UsuarioORM)
                .filter_by(id=id_usuario)
                .update({UsuarioORM.password: password_hash}, synchronize_session=False)
            )
            session.commit()
            return actualizados > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def eliminar(self, id_usuario: int) -> bool:
        session = self.Session()
        try:
            borrados = session.query(UsuarioORM).filter_by(id=id_usuario).delete(synchronize_session=False)
            session.commit()
            return borrados > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
