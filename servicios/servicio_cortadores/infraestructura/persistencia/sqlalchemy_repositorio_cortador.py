# servicios/servicio_cortadores/infraestructura/persistencia/sqlalchemy_repositorio_cortador.py
from __future__ import annotations

from typing import List

from inicializar_db import CortadorORM
from servicios.servicio_cortadores.dominio.cortador import Cortador


class SQLAlchemyRepositorioCortador:
    """Repositorio simple de cortadores (listar, crear, borrar)."""

    def __init__(self, session_factory):
        self.Session = session_factory

    def listar(self) -> List[Cortador]:
        with self.Session() as s:
            rows = s.query(CortadorORM).order_by(CortadorORM.id).all()
            return [Cortador(id=r.id, nombre=r.nombre) for r in rows]

    def crear(self, nombre: str) -> Cortador:
        nombre = str(nombre or "").strip()
        if not nombre:
            raise ValueError("El campo 'nombre' es requerido.")
        session = self.Session()
        try:
            row = CortadorORM(nombre=nombre)
            session.add(row)
            session.commit()
            return Cortador(id=row.id, nombre=row.nombre)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def eliminar(self, cortador_id: int) -> bool:
        # Los pedidos que lo nombran no se tocan
        session = self.Session()
        try:
            borrados = session.query(CortadorORM).filter_by(id=cortador_id).delete(synchronize_session=False)
            session.commit()
            return borrados > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
