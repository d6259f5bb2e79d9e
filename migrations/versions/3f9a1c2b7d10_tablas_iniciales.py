"""tablas iniciales: users, cortadores, pedidos, productos_pedido

Revision ID: 3f9a1c2b7d10
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'cortadores',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.String(length=100), nullable=False),
    )

    op.create_table(
        'pedidos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('numero_factura', sa.String(length=50), nullable=False),
        sa.Column('cliente', sa.String(length=150), nullable=False),
        sa.Column('fecha_ingreso', sa.DateTime(), nullable=False),
        sa.Column('fecha_entrega', sa.Date(), nullable=True),
        sa.Column('estado', sa.String(length=50), nullable=False),
        sa.Column('cortador', sa.String(length=100), nullable=True),
    )
    op.create_index('ix_pedidos_fecha_ingreso', 'pedidos', ['fecha_ingreso'])

    op.create_table(
        'productos_pedido',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('pedido_id', sa.Integer(), sa.ForeignKey('pedidos.id'), nullable=False),
        sa.Column('descripcion', sa.String(length=255), nullable=False),
        sa.Column('cantidad', sa.Integer(), nullable=False),
        sa.Column('ingreso', sa.Float(), nullable=False),
        sa.Column('egreso', sa.Float(), nullable=False),
        sa.Column('total', sa.Float(), nullable=False),
    )
    op.create_index('ix_productos_pedido_pedido_id', 'productos_pedido', ['pedido_id'])


def downgrade() -> None:
    op.drop_index('ix_productos_pedido_pedido_id', table_name='productos_pedido')
    op.drop_table('productos_pedido')
    op.drop_index('ix_pedidos_fecha_ingreso', table_name='pedidos')
    op.drop_table('pedidos')
    op.drop_table('cortadores')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
