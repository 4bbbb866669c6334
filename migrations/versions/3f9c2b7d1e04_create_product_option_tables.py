"""create product option, value, product, sku and audit tables

Revision ID: 3f9c2b7d1e04
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2b7d1e04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        'product_options',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('option_type', sa.String(length=255), nullable=True),
        sa.Column('attribute_name', sa.String(length=255), nullable=True),
        sa.Column('label', sa.String(length=255), nullable=True),
        sa.Column('required', sa.Boolean(), nullable=True),
        sa.Column('use_in_sku_generation', sa.Boolean(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('validation_type', sa.String(length=255), nullable=True),
        sa.Column('validation_string', sa.String(length=255), nullable=True),
        sa.Column('error_code', sa.String(length=255), nullable=True),
        sa.Column('error_message', sa.String(length=255), nullable=True),
    )
    op.create_index('ix_product_options_display_order', 'product_options', ['display_order'])
    op.create_table(
        'product_option_values',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_option_id', sa.Integer(),
                  sa.ForeignKey('product_options.id', ondelete='CASCADE'), nullable=False),
        sa.Column('attribute_value', sa.String(length=255), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('price_adjustment', sa.Numeric(precision=19, scale=5), nullable=True),
    )
    op.create_index('ix_product_option_values_product_option_id',
                    'product_option_values', ['product_option_id'])
    op.create_table(
        'product_option_xref',
        sa.Column('product_option_id', sa.Integer(),
                  sa.ForeignKey('product_options.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_table(
        'skus',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_skus_product_id', 'skus', ['product_id'])
    op.create_table(
        'sku_option_value_xref',
        sa.Column('sku_id', sa.Integer(),
                  sa.ForeignKey('skus.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('product_option_value_id', sa.Integer(),
                  sa.ForeignKey('product_option_values.id', ondelete='CASCADE'),
                  primary_key=True),
    )
    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('admin_id', sa.BigInteger(), nullable=True),
        sa.Column('action', sa.String(length=50), nullable=False),
        sa.Column('entity_type', sa.String(length=50), nullable=False),
        sa.Column('entity_id', sa.Integer(), nullable=True),
        sa.Column('payload', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_audit_log_admin_id', 'audit_log', ['admin_id'])
    op.create_index('ix_audit_log_entity_id', 'audit_log', ['entity_id'])
    op.create_index('ix_audit_log_created_at', 'audit_log', ['created_at'])


def downgrade():
    op.drop_table('audit_log')
    op.drop_table('sku_option_value_xref')
    op.drop_table('skus')
    op.drop_table('product_option_xref')
    op.drop_table('product_option_values')
    op.drop_table('product_options')
    op.drop_table('products')
