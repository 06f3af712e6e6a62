from alembic import op
import sqlalchemy as sa

revision = '0002_orders_docs_invoices'
down_revision = '0001_init'
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('customer_name', sa.String(200), nullable=False),
        sa.Column('po_number', sa.String(50), nullable=True),
        sa.Column('origin', sa.String(200), nullable=False),
        sa.Column('destination', sa.String(200), nullable=False),
        sa.Column('weight', sa.Float, nullable=False),
        sa.Column('dimensions', sa.String(100), nullable=True),
        sa.Column('status', sa.String(30), nullable=False),
        # Populated by load planning
        sa.Column('shipment_id', sa.Integer, sa.ForeignKey('shipments.id'), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.CheckConstraint("status IN ('Unplanned', 'Planned')", name='ck_orders_status')
    )
    op.create_index('ix_orders_status', 'orders', ['status'])
    op.create_index('ix_orders_shipment_id', 'orders', ['shipment_id'])

    op.create_table(
        'documents',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('shipment_id', sa.Integer, sa.ForeignKey('shipments.id'), nullable=False),
        sa.Column('type', sa.String(30), nullable=False),
        sa.Column('filename', sa.String(255), nullable=False),
        sa.Column('size', sa.Integer, nullable=False),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('uploaded_at', sa.DateTime, nullable=False)
    )
    op.create_index('ix_documents_shipment_id', 'documents', ['shipment_id'])

    op.create_table(
        'invoices',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('shipment_id', sa.Integer, sa.ForeignKey('shipments.id'), nullable=False),
        sa.Column('carrier_id', sa.Integer, sa.ForeignKey('carriers.id'), nullable=True),
        sa.Column('invoice_number', sa.String(50), nullable=False, unique=True),
        sa.Column('quoted_amount', sa.Float, nullable=False),
        sa.Column('actual_amount', sa.Float, nullable=False),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('due_date', sa.String(30), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.CheckConstraint(
            "status IN ('Pending', 'Approved', 'Disputed', 'Paid')",
            name='ck_invoices_status'
        )
    )
    op.create_index('ix_invoices_shipment_id', 'invoices', ['shipment_id'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('role', sa.String(30), nullable=False),
        sa.Column('department', sa.String(100), nullable=True),
        sa.Column('last_login', sa.DateTime, nullable=True),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.CheckConstraint(
            "role IN ('Admin', 'Dispatcher', 'Driver', 'Customer')",
            name='ck_users_role'
        )
    )

def downgrade():
    op.drop_table('users')
    op.drop_index('ix_invoices_shipment_id', table_name='invoices')
    op.drop_table('invoices')
    op.drop_index('ix_documents_shipment_id', table_name='documents')
    op.drop_table('documents')
    op.drop_index('ix_orders_shipment_id', table_name='orders')
    op.drop_index('ix_orders_status', table_name='orders')
    op.drop_table('orders')
