"""Initial inventory schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'products',
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('price', sa.Float(), sa.CheckConstraint('price >= 0'), nullable=False),
        sa.Column('stock', sa.Integer(), sa.CheckConstraint('stock >= 0'), nullable=False),
        sa.Column('picture', sa.String(), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('product_id'),
    )
    op.create_index(op.f('ix_products_name'), 'products', ['name'], unique=False)

    op.create_table(
        'categories',
        sa.Column('category_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('category_id'),
    )

    op.create_table(
        'product_categories',
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('category_id', sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(['product_id'], ['products.product_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.category_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('product_id', 'category_id'),
    )

    op.create_table(
        'packs',
        sa.Column('pack_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('price', sa.Float(), sa.CheckConstraint('price >= 0'), nullable=False),
        sa.Column('picture', sa.String(), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('pack_id'),
    )
    op.create_index(op.f('ix_packs_name'), 'packs', ['name'], unique=False)

    op.create_table(
        'pack_items',
        sa.Column('pack_item_id', sa.String(length=36), nullable=False),
        sa.Column('pack_id', sa.String(length=36), nullable=False),
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('quantity', sa.Integer(), sa.CheckConstraint('quantity >= 1'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['pack_id'], ['packs.pack_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['products.product_id']),
        sa.PrimaryKeyConstraint('pack_item_id'),
    )
    op.create_index(op.f('ix_pack_items_pack_id'), 'pack_items', ['pack_id'], unique=False)
    op.create_index(op.f('ix_pack_items_product_id'), 'pack_items', ['product_id'], unique=False)

    op.create_table(
        'item_types',
        sa.Column('item_type_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.Enum('product', 'pack', name='itemkind'), nullable=False),
        sa.PrimaryKeyConstraint('item_type_id'),
        sa.UniqueConstraint('name'),
    )
    op.bulk_insert(
        sa.table('item_types', sa.column('item_type_id', sa.String), sa.column('name', sa.String)),
        [
            {'item_type_id': 'product', 'name': 'product'},
            {'item_type_id': 'pack', 'name': 'pack'},
        ],
    )

    op.create_table(
        'payment_methods',
        sa.Column('payment_method_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('payment_method_id'),
    )

    op.create_table(
        'expenses',
        sa.Column('expense_id', sa.String(length=36), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('total', sa.Float(), sa.CheckConstraint('total >= 0'), nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('payment_method_id', sa.String(length=36), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['payment_method_id'], ['payment_methods.payment_method_id']),
        sa.PrimaryKeyConstraint('expense_id'),
    )

    op.create_table(
        'expense_items',
        sa.Column('expense_item_id', sa.String(length=36), nullable=False),
        sa.Column('expense_id', sa.String(length=36), nullable=False),
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('quantity', sa.Integer(), sa.CheckConstraint('quantity >= 1'), nullable=False),
        sa.Column('unit_price', sa.Float(), sa.CheckConstraint('unit_price >= 0'), nullable=False),
        sa.Column('subtotal', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['expense_id'], ['expenses.expense_id']),
        sa.ForeignKeyConstraint(['product_id'], ['products.product_id']),
        sa.PrimaryKeyConstraint('expense_item_id'),
    )
    op.create_index(op.f('ix_expense_items_expense_id'), 'expense_items', ['expense_id'], unique=False)
    op.create_index(op.f('ix_expense_items_product_id'), 'expense_items', ['product_id'], unique=False)

    op.create_table(
        'orders',
        sa.Column('order_id', sa.String(length=36), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('total', sa.Float(), nullable=False),
        sa.Column('payment_method_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['payment_method_id'], ['payment_methods.payment_method_id']),
        sa.PrimaryKeyConstraint('order_id'),
    )

    op.create_table(
        'detail_orders',
        sa.Column('order_detail_id', sa.String(length=36), nullable=False),
        sa.Column('order_id', sa.String(length=36), nullable=False),
        sa.Column('item_type', sa.String(length=36), nullable=False),
        sa.Column('item_id', sa.String(length=36), nullable=False),
        sa.Column('quantity', sa.Integer(), sa.CheckConstraint('quantity >= 1'), nullable=False),
        sa.Column('unit_price', sa.Float(), nullable=False),
        sa.Column('total_price', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['orders.order_id']),
        sa.ForeignKeyConstraint(['item_type'], ['item_types.item_type_id']),
        sa.PrimaryKeyConstraint('order_detail_id'),
    )
    op.create_index(op.f('ix_detail_orders_order_id'), 'detail_orders', ['order_id'], unique=False)
    op.create_index(op.f('ix_detail_orders_item_id'), 'detail_orders', ['item_id'], unique=False)

    op.create_table(
        'stock_movements',
        sa.Column('movement_id', sa.String(length=36), nullable=False),
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('qty', sa.Integer(), nullable=False),
        sa.Column('type', sa.Enum('IN', 'OUT', 'ADJUSTMENT', name='stockmovementtype'), nullable=False),
        sa.Column('reason', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['product_id'], ['products.product_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('movement_id'),
    )
    op.create_index(op.f('ix_stock_movements_product_id'), 'stock_movements', ['product_id'], unique=False)
    op.create_index(op.f('ix_stock_movements_created_at'), 'stock_movements', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_stock_movements_created_at'), table_name='stock_movements')
    op.drop_index(op.f('ix_stock_movements_product_id'), table_name='stock_movements')
    op.drop_table('stock_movements')
    op.drop_index(op.f('ix_detail_orders_item_id'), table_name='detail_orders')
    op.drop_index(op.f('ix_detail_orders_order_id'), table_name='detail_orders')
    op.drop_table('detail_orders')
    op.drop_table('orders')
    op.drop_index(op.f('ix_expense_items_product_id'), table_name='expense_items')
    op.drop_index(op.f('ix_expense_items_expense_id'), table_name='expense_items')
    op.drop_table('expense_items')
    op.drop_table('expenses')
    op.drop_table('payment_methods')
    op.drop_table('item_types')
    op.drop_index(op.f('ix_pack_items_product_id'), table_name='pack_items')
    op.drop_index(op.f('ix_pack_items_pack_id'), table_name='pack_items')
    op.drop_table('pack_items')
    op.drop_index(op.f('ix_packs_name'), table_name='packs')
    op.drop_table('packs')
    op.drop_table('product_categories')
    op.drop_table('categories')
    op.drop_index(op.f('ix_products_name'), table_name='products')
    op.drop_table('products')
