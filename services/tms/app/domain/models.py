from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy import String, ForeignKey, Float, Integer, DateTime, CheckConstraint
from datetime import datetime
from typing import Optional

SHIPMENT_STATUSES = ("Pending", "Dispatched", "In Transit", "Delivered", "Exception")
ORDER_UNPLANNED = "Unplanned"
ORDER_PLANNED = "Planned"
ORDER_STATUSES = (ORDER_UNPLANNED, ORDER_PLANNED)
INVOICE_STATUSES = ("Pending", "Approved", "Disputed", "Paid")
DOCUMENT_TYPES = ("BOL", "POD", "Invoice", "Customs", "Other")
USER_ROLES = ("Admin", "Dispatcher", "Driver", "Customer")

def _in(column: str, values: tuple) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"

class Base(DeclarativeBase):
    pass

class Carrier(Base):
    __tablename__ = "carriers"
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    mc_number: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    dot_number: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    contact_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    insurance_limit: Mapped[float] = mapped_column(Float, default=100000)
    service_level: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    # Comma-separated transport modes, e.g. "LTL,FTL"
    modes: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    on_time_rate: Mapped[float] = mapped_column(Float, default=0.95)
    claim_rate: Mapped[float] = mapped_column(Float, default=0.01)
    rating: Mapped[float] = mapped_column(Float, default=4.0)
    status: Mapped[str] = mapped_column(String(30), default="Active")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    lanes: Mapped[list["Lane"]] = relationship("Lane", back_populates="carrier", cascade="all, delete-orphan")

class Lane(Base):
    __tablename__ = "lanes"
    id: Mapped[int] = mapped_column(primary_key=True)
    carrier_id: Mapped[int] = mapped_column(ForeignKey("carriers.id", ondelete="CASCADE"))
    origin_zone: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    destination_zone: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    carrier: Mapped[Carrier] = relationship("Carrier", back_populates="lanes")
    rates: Mapped[list["Rate"]] = relationship("Rate", back_populates="lane", cascade="all, delete-orphan")

class Rate(Base):
    __tablename__ = "rates"
    id: Mapped[int] = mapped_column(primary_key=True)
    carrier_id: Mapped[int] = mapped_column(ForeignKey("carriers.id", ondelete="CASCADE"))
    lane_id: Mapped[int] = mapped_column(ForeignKey("lanes.id", ondelete="CASCADE"))
    freight_class: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    base_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    fuel_surcharge: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    lane: Mapped[Lane] = relationship("Lane", back_populates="rates")

class Shipment(Base):
    __tablename__ = "shipments"
    __table_args__ = (CheckConstraint(_in("status", SHIPMENT_STATUSES), name="ck_shipments_status"),)
    id: Mapped[int] = mapped_column(primary_key=True)
    origin: Mapped[str] = mapped_column(String(200))
    destination: Mapped[str] = mapped_column(String(200))
    weight: Mapped[float] = mapped_column(Float)
    dimensions: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    freight_class: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    status: Mapped[str] = mapped_column(String(30), default="Pending")
    carrier_id: Mapped[Optional[int]] = mapped_column(ForeignKey("carriers.id"), nullable=True)
    tracking_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    estimated_delivery: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    carrier: Mapped[Optional[Carrier]] = relationship("Carrier")
    events: Mapped[list["ShipmentEvent"]] = relationship(
        "ShipmentEvent", back_populates="shipment", order_by="ShipmentEvent.event_time"
    )
    orders: Mapped[list["Order"]] = relationship("Order", back_populates="shipment")

class ShipmentEvent(Base):
    __tablename__ = "shipment_events"
    id: Mapped[int] = mapped_column(primary_key=True)
    shipment_id: Mapped[int] = mapped_column(ForeignKey("shipments.id"), index=True)
    event_type: Mapped[str] = mapped_column(String(50))
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    event_time: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    shipment: Mapped[Shipment] = relationship("Shipment", back_populates="events")

class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (CheckConstraint(_in("status", ORDER_STATUSES), name="ck_orders_status"),)
    id: Mapped[int] = mapped_column(primary_key=True)
    customer_name: Mapped[str] = mapped_column(String(200))
    po_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    origin: Mapped[str] = mapped_column(String(200))
    destination: Mapped[str] = mapped_column(String(200))
    weight: Mapped[float] = mapped_column(Float)
    dimensions: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(30), default=ORDER_UNPLANNED, index=True)
    # Set only by load planning
    shipment_id: Mapped[Optional[int]] = mapped_column(ForeignKey("shipments.id"), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    shipment: Mapped[Optional[Shipment]] = relationship("Shipment", back_populates="orders")

class Document(Base):
    __tablename__ = "documents"
    id: Mapped[int] = mapped_column(primary_key=True)
    shipment_id: Mapped[int] = mapped_column(ForeignKey("shipments.id"), index=True)
    type: Mapped[str] = mapped_column(String(30))
    filename: Mapped[str] = mapped_column(String(255))
    size: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(30), default="Uploaded")
    uploaded_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    shipment: Mapped[Shipment] = relationship("Shipment")

class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (CheckConstraint(_in("status", INVOICE_STATUSES), name="ck_invoices_status"),)
    id: Mapped[int] = mapped_column(primary_key=True)
    shipment_id: Mapped[int] = mapped_column(ForeignKey("shipments.id"), index=True)
    carrier_id: Mapped[Optional[int]] = mapped_column(ForeignKey("carriers.id"), nullable=True)
    invoice_number: Mapped[str] = mapped_column(String(50), unique=True)
    quoted_amount: Mapped[float] = mapped_column(Float)
    actual_amount: Mapped[float] = mapped_column(Float)
    status: Mapped[str] = mapped_column(String(30), default="Pending")
    due_date: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    shipment: Mapped[Shipment] = relationship("Shipment")
    carrier: Mapped[Optional[Carrier]] = relationship("Carrier")

class User(Base):
    __tablename__ = "users"
    __table_args__ = (CheckConstraint(_in("role", USER_ROLES), name="ck_users_role"),)
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    role: Mapped[str] = mapped_column(String(30), default="Dispatcher")
    department: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    status: Mapped[str] = mapped_column(String(30), default="Active")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
