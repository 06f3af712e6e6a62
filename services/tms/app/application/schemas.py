from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

class CamelModel(BaseModel):
    """JSON is camelCase for the dashboard; snake_case is accepted on input."""
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

# Orders / load planning

class OrderCreate(CamelModel):
    customer_name: str
    po_number: Optional[str] = None
    origin: str
    destination: str
    weight: float = Field(gt=0)
    dimensions: Optional[str] = None

class OrderRead(CamelModel):
    id: int
    customer_name: str
    po_number: Optional[str] = None
    origin: str
    destination: str
    weight: float
    dimensions: Optional[str] = None
    status: str
    shipment_id: Optional[int] = None
    created_at: datetime

class LoadPlanRequest(CamelModel):
    order_ids: list[int] = Field(default_factory=list)
    origin: Optional[str] = None
    destination: Optional[str] = None
    weight: Optional[float] = Field(default=None, gt=0)
    dimensions: Optional[str] = None

class LoadPlanResult(CamelModel):
    shipment_id: int
    order_ids: list[int]
    weight: float
    message: str = "Load planned and shipment created"

# Shipments / tracking

class ShipmentCreate(CamelModel):
    origin: str
    destination: str
    weight: float = Field(gt=0)
    dimensions: Optional[str] = None
    freight_class: Optional[str] = None
    status: Optional[str] = None
    carrier_id: Optional[int] = None
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[str] = None

class ShipmentRead(CamelModel):
    id: int
    origin: str
    destination: str
    weight: float
    dimensions: Optional[str] = None
    freight_class: Optional[str] = None
    status: str
    carrier_id: Optional[int] = None
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[str] = None
    created_at: datetime

class ShipmentEventCreate(CamelModel):
    event_type: str
    location: Optional[str] = None
    message: Optional[str] = None

class ShipmentEventRead(CamelModel):
    id: int
    shipment_id: int
    event_type: str
    location: Optional[str] = None
    message: Optional[str] = None
    event_time: datetime

class TrackingSummary(ShipmentRead):
    carrier_name: Optional[str] = None
    last_event_type: Optional[str] = None
    last_location: Optional[str] = None
    last_event_time: Optional[datetime] = None

class TrackingDetail(ShipmentRead):
    carrier_name: Optional[str] = None
    carrier_phone: Optional[str] = None
    events: list[ShipmentEventRead] = []

# Carriers

class CarrierCreate(CamelModel):
    name: str
    mc_number: Optional[str] = None
    dot_number: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    insurance_limit: Optional[float] = None
    service_level: Optional[str] = None
    modes: Optional[str] = None
    status: Optional[str] = None

class CarrierUpdate(CamelModel):
    name: Optional[str] = None
    mc_number: Optional[str] = None
    dot_number: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    insurance_limit: Optional[float] = None
    service_level: Optional[str] = None
    modes: Optional[str] = None
    status: Optional[str] = None

class CarrierRead(CamelModel):
    id: int
    name: str
    mc_number: Optional[str] = None
    dot_number: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    insurance_limit: float
    service_level: Optional[str] = None
    modes: Optional[str] = None
    on_time_rate: float
    claim_rate: float
    rating: float
    status: str
    created_at: datetime

# Documents

class DocumentCreate(CamelModel):
    shipment_id: int
    type: str
    filename: str
    size: int = Field(default=0, ge=0)

class DocumentRead(CamelModel):
    id: int
    shipment_id: int
    type: str
    filename: str
    size: int
    status: str
    uploaded_at: datetime
    tracking_number: Optional[str] = None

# Invoices

class InvoiceRead(CamelModel):
    id: int
    shipment_id: int
    carrier_id: Optional[int] = None
    invoice_number: str
    quoted_amount: float
    actual_amount: float
    status: str
    due_date: Optional[str] = None
    created_at: datetime
    tracking_number: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    carrier_name: Optional[str] = None

class InvoiceStatusUpdate(CamelModel):
    status: str

# Users

class UserRead(CamelModel):
    id: int
    name: str
    email: str
    role: str
    department: Optional[str] = None
    last_login: Optional[datetime] = None
    status: str
    created_at: datetime

class UserRoleUpdate(CamelModel):
    role: str

# Quotes

class QuoteRequest(CamelModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    weight: Optional[float] = None
    freight_class: Optional[str] = None

class QuoteRead(CamelModel):
    carrier: str
    service: str
    rate: float
    transit_days: int
    score: int
