from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'carriers',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('mc_number', sa.String(30), nullable=True),
        sa.Column('dot_number', sa.String(30), nullable=True),
        sa.Column('contact_name', sa.String(200), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('contact_phone', sa.String(50), nullable=True),
        sa.Column('insurance_limit', sa.Float, nullable=False),
        sa.Column('service_level', sa.String(50), nullable=True),
        sa.Column('modes', sa.String(200), nullable=True),
        sa.Column('on_time_rate', sa.Float, nullable=False),
        sa.Column('claim_rate', sa.Float, nullable=False),
        sa.Column('rating', sa.Float, nullable=False),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False)
    )
    op.create_table(
        'lanes',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('carrier_id', sa.Integer, sa.ForeignKey('carriers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('origin_zone', sa.String(100), nullable=True),
        sa.Column('destination_zone', sa.String(100), nullable=True)
    )
    op.create_table(
        'rates',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('carrier_id', sa.Integer, sa.ForeignKey('carriers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('lane_id', sa.Integer, sa.ForeignKey('lanes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('freight_class', sa.String(10), nullable=True),
        sa.Column('base_rate', sa.Float, nullable=True),
        sa.Column('fuel_surcharge', sa.Float, nullable=True)
    )
    op.create_table(
        'shipments',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('origin', sa.String(200), nullable=False),
        sa.Column('destination', sa.String(200), nullable=False),
        sa.Column('weight', sa.Float, nullable=False),
        sa.Column('dimensions', sa.String(100), nullable=True),
        sa.Column('freight_class', sa.String(10), nullable=True),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('carrier_id', sa.Integer, sa.ForeignKey('carriers.id'), nullable=True),
        sa.Column('tracking_number', sa.String(50), nullable=True),
        sa.Column('estimated_delivery', sa.String(30), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.CheckConstraint(
            "status IN ('Pending', 'Dispatched', 'In Transit', 'Delivered', 'Exception')",
            name='ck_shipments_status'
        )
    )
    op.create_table(
        'shipment_events',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('shipment_id', sa.Integer, sa.ForeignKey('shipments.id'), nullable=False),
        sa.Column('event_type', sa.String(50), nullable=False),
        sa.Column('location', sa.String(200), nullable=True),
        sa.Column('message', sa.String(500), nullable=True),
        sa.Column('event_time', sa.DateTime, nullable=False)
    )
    op.create_index('ix_shipment_events_shipment_id', 'shipment_events', ['shipment_id'])

def downgrade():
    op.drop_index('ix_shipment_events_shipment_id', table_name='shipment_events')
    op.drop_table('shipment_events')
    op.drop_table('shipments')
    op.drop_table('rates')
    op.drop_table('lanes')
    op.drop_table('carriers')
