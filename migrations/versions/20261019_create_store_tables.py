"""Create store tables (categories, products, cashiers, orders, order_products)

Revision ID: 20261019_create_store_tables
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_create_store_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("category_name", sa.String(100), nullable=False),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("product_name", sa.String(150), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("brand", sa.String(100), nullable=False),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True),
    )

    op.create_table(
        "cashiers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("cashier_id", sa.Integer, sa.ForeignKey("cashiers.id", ondelete="RESTRICT"), nullable=False, index=True),
        sa.Column("paid_on_date", sa.DateTime, nullable=True),
    )

    # one row per (order, product); the order total is computed on read
    op.create_table(
        "order_products",
        sa.Column("order_id", sa.Integer, sa.ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("products.id", ondelete="RESTRICT"), primary_key=True),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="1"),
        sa.CheckConstraint("quantity > 0", name="ck_order_products_quantity_positive"),
    )


def downgrade() -> None:
    op.drop_table("order_products")
    op.drop_table("orders")
    op.drop_table("cashiers")
    op.drop_table("products")
    op.drop_table("categories")
