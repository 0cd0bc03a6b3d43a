from alembic import op
import sqlalchemy as sa

revision = '0002_add_inventories'
down_revision = '0001_init'
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'inventories',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('product_id', sa.Integer, sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('quantity', sa.Integer, nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.CheckConstraint('quantity >= 0', name='ck_inventories_quantity_non_negative')
    )
    op.create_index('ix_inventories_product_id', 'inventories', ['product_id'])
    op.create_index('ix_inventories_location', 'inventories', ['location'])

def downgrade():
    op.drop_index('ix_inventories_location', table_name='inventories')
    op.drop_index('ix_inventories_product_id', table_name='inventories')
    op.drop_table('inventories')
