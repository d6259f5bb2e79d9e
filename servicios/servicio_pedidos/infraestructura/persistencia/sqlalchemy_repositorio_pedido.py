# servicios/servicio_pedidos/infraestructura/persistencia/sqlalchemy_repositorio_pedido.py

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.orm import selectinload

# Contrato de la capa de aplicación, entidades de dominio y modelos ORM
from servicios.servicio_pedidos.aplicacion.repositorios.repositorio_pedido_interface import IRepositorioPedido
from servicios.servicio_pedidos.dominio.pedido import (
    Pedido,
    ProductoPedido,
    NuevoPedido,
    CambiosPedido,
    ESTADO_INICIAL,
)
from servicios.servicio_pedidos.dominio.excepciones import PedidoNoEncontradoError
from inicializar_db import PedidoORM, ProductoPedidoORM


# Adaptador de persistencia sobre SQLAlchemy. La fábrica de sesiones se inyecta,
# así cada operación toma una conexión del pool y la devuelve al terminar,
# haya éxito o error.
class SQLAlchemyRepositorioPedido(IRepositorioPedido):

    def __init__(self, session_factory, reloj=datetime.now):
        self.Session = session_factory
        self._reloj = reloj

    # --------------------------------------------------------------------------
    # Mapeo ORM -> Dominio
    # --------------------------------------------------------------------------
    @staticmethod
    def _producto_a_dominio(row: ProductoPedidoORM) -> ProductoPedido:
        return ProductoPedido(
            id=row.id,
            pedido_id=row.pedido_id,
            descripcion=row.descripcion,
            cantidad=row.cantidad,
            ingreso=row.ingreso,
            egreso=row.egreso,
            total=row.total,
        )

    def _a_dominio(self, row: PedidoORM, productos: Iterable[ProductoPedidoORM]) -> Pedido:
        return Pedido(
            id=row.id,
            numero_factura=row.numero_factura,
            cliente=row.cliente,
            fecha_ingreso=row.fecha_ingreso,
            fecha_entrega=row.fecha_entrega,
            estado=row.estado,
            cortador=row.cortador,
            productos=[self._producto_a_dominio(p) for p in productos],
        )

    # --------------------------------------------------------------------------
    # Helpers de transacción
    # --------------------------------------------------------------------------
    @staticmethod
    def _insertar_productos(session, pedido_id: int, productos: Iterable[ProductoPedido]) -> None:
        for p in productos:
            session.add(ProductoPedidoORM(
                pedido_id=pedido_id,
                descripcion=p.descripcion,
                cantidad=p.cantidad,
                ingreso=p.ingreso,
                egreso=p.egreso,
                total=p.total,
            ))
        session.flush()

    def _leer(self, session, pedido_id: int) -> Pedido:
        row = session.get(PedidoORM, pedido_id)
        productos = (
            session.query(ProductoPedidoORM)
            .filter_by(pedido_id=pedido_id)
            .order_by(ProductoPedidoORM.id)
            .all()
        )
        return self._a_dominio(row, productos)

    # --------------------------------------------------------------------------
    # Implementación del Contrato IRepositorioPedido
    # --------------------------------------------------------------------------
    def crear(self, nuevo: NuevoPedido) -> Pedido:
        session = self.Session()
        try:
            row = PedidoORM(
                numero_factura=nuevo.numero_factura,
                cliente=nuevo.cliente,
                fecha_ingreso=self._reloj(),
                fecha_entrega=nuevo.fecha_entrega,
                estado=ESTADO_INICIAL,
            )
            session.add(row)
            session.flush()  # obtiene el id generado

            self._insertar_productos(session, row.id, nuevo.productos)

            pedido = self._leer(session, row.id)
            session.commit()
            return pedido
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def actualizar(self, pedido_id: int, cambios: CambiosPedido, productos: Optional[List[ProductoPedido]] = None) -> Pedido:
        session = self.Session()
        try:
            row = session.get(PedidoORM, pedido_id)
            if row is None:
                raise PedidoNoEncontradoError()

            # Sólo se escriben las columnas enviadas; sin campos no hay UPDATE
            for campo, valor in cambios.campos().items():
                setattr(row, campo, valor)
            session.flush()

            if productos:
                (
                    session.query(ProductoPedidoORM)
                    .filter_by(pedido_id=pedido_id)
                    .delete(synchronize_session=False)
                )
                self._insertar_productos(session, pedido_id, productos)

            pedido = self._leer(session, pedido_id)
            session.commit()
            return pedido
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def eliminar(self, pedido_id: int) -> None:
        session = self.Session()
        try:
            # Hijos antes que el padre
            session.query(ProductoPedidoORM).filter_by(pedido_id=pedido_id).delete(synchronize_session=False)
            session.query(PedidoORM).filter_by(id=pedido_id).delete(synchronize_session=False)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def listar(self) -> List[Pedido]:
        with self.Session() as s:
            rows = (
                s.query(PedidoORM)
                .options(selectinload(PedidoORM.productos))
                .order_by(PedidoORM.fecha_ingreso.desc(), PedidoORM.id.desc())
                .all()
            )
            return [self._a_dominio(row, row.productos) for row in rows]
