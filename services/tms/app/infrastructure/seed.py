"""
Demo data for a fresh database.

Each table is seeded only while it is empty, so running this on every
startup is safe.
"""

from datetime import datetime
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app.domain.models import (
    Carrier, Document, Invoice, Order, Shipment, ShipmentEvent, User,
)
from shared.core import get_logger
from .db import transaction

logger = get_logger(__name__)

CARRIERS = [
    # name, mc, dot, contact, email, phone, insurance, service level, modes, on-time, claims, rating, status
    ("FedEx Freight", "MC-299007", "DOT-0226516", "James Holloway", "j.holloway@fedexfreight.com", "1-800-463-3339", 1000000, "Priority", "LTL,FTL", 0.97, 0.005, 4.8, "Active"),
    ("XPO Logistics", "MC-107672", "DOT-0023389", "Sarah Chen", "s.chen@xpo.com", "1-844-742-5976", 500000, "Standard", "LTL,FTL,Intermodal", 0.93, 0.012, 4.4, "Active"),
    ("Old Dominion Freight", "MC-209676", "DOT-0082619", "Marcus Webb", "m.webb@odfl.com", "1-800-432-6335", 750000, "Guaranteed", "LTL", 0.99, 0.003, 4.9, "Active"),
    ("Estes Express Lines", "MC-029405", "DOT-0029405", "Diane Forrest", "d.forrest@estes-express.com", "1-804-353-1900", 500000, "Standard", "LTL", 0.94, 0.008, 4.5, "Active"),
    ("Werner Enterprises", "MC-112923", "DOT-0070278", "Tom Brierly", "t.brierly@werner.com", "1-800-228-2240", 1000000, "Standard", "FTL,Temp Controlled", 0.95, 0.006, 4.6, "Active"),
    ("Spot Carrier LLC", "MC-887412", "DOT-0344892", "Al Martinez", "a.martinez@spotcarrier.com", "555-209-4471", 100000, "Spot", "FTL", 0.88, 0.020, 3.7, "Pending"),
]

SHIPMENTS = [
    # origin, destination, weight, dimensions, class, status, carrier, tracking number, ETA
    ("Chicago, IL", "Dallas, TX", 1850, "48x40x48", "70", "In Transit", "Old Dominion Freight", "OLD-4491-2024", "2026-02-26"),
    ("Atlanta, GA", "Los Angeles, CA", 3400, "96x48x60", "85", "In Transit", "XPO Logistics", "XPO-8823-2024", "2026-02-27"),
    ("New York, NY", "Miami, FL", 920, "48x48x36", "55", "Delivered", "FedEx Freight", "FDX-2211-2024", "2026-02-23"),
    ("Seattle, WA", "Phoenix, AZ", 2100, "80x48x52", "92.5", "Exception", "Estes Express Lines", "EST-9944-2024", "2026-02-25"),
    ("Houston, TX", "Denver, CO", 660, "40x32x28", "50", "Dispatched", "Werner Enterprises", "WNR-5512-2024", "2026-02-28"),
    ("Boston, MA", "Charlotte, NC", 450, "36x24x24", "50", "Pending", "FedEx Freight", None, "2026-03-01"),
]

# Keyed by tracking number
SHIPMENT_EVENTS = {
    "OLD-4491-2024": [
        ("Picked Up", "Chicago, IL", "Shipment picked up from origin", "2026-02-24 08:00:00"),
        ("Departed Terminal", "Chicago IL Hub", "Departed Chicago hub", "2026-02-24 14:30:00"),
        ("In Transit", "St. Louis, MO", "En route to destination", "2026-02-25 06:15:00"),
    ],
    "XPO-8823-2024": [
        ("Picked Up", "Atlanta, GA", "Shipment picked up from origin", "2026-02-23 09:00:00"),
        ("Departed Terminal", "Atlanta GA Hub", "Departed Atlanta hub", "2026-02-23 17:00:00"),
        ("In Transit", "Dallas, TX", "En route, on schedule", "2026-02-24 11:30:00"),
    ],
    "FDX-2211-2024": [
        ("Picked Up", "New York, NY", "Shipment picked up", "2026-02-21 07:30:00"),
        ("In Transit", "Philadelphia, PA", "Moving south on I-95", "2026-02-21 13:00:00"),
        ("Out for Delivery", "Miami, FL", "Out for final delivery", "2026-02-23 07:45:00"),
        ("Delivered", "Miami, FL", "Delivered and signed for by M. Garcia", "2026-02-23 11:20:00"),
    ],
    "EST-9944-2024": [
        ("Picked Up", "Seattle, WA", "Shipment picked up", "2026-02-23 10:00:00"),
        ("In Transit", "Portland, OR", "Moving south on I-5", "2026-02-23 15:00:00"),
        ("Exception", "Sacramento, CA", "Mechanical delay, trailer breakdown. ETA pushed 24hrs.", "2026-02-24 09:00:00"),
    ],
    "WNR-5512-2024": [
        ("Dispatched", "Houston, TX", "Driver assigned and en route to pickup", "2026-02-24 06:00:00"),
    ],
}

ORDERS = [
    # customer, PO, origin, destination, weight, dimensions
    ("Acme Manufacturing", "PO-10421", "Cleveland, OH", "Houston, TX", 4500, "48x40x60"),
    ("Great Lakes Steel", "PO-10422", "Cleveland, OH", "Houston, TX", 6200, "96x48x48"),
    ("Midwest Paper Co", "PO-10423", "Columbus, OH", "Dallas, TX", 12800, "96x48x72"),
    ("Heartland Foods", "PO-10424", "Indianapolis, IN", "San Antonio, TX", 18500, "96x48x84"),
    ("Buckeye Plastics", "PO-10425", "Toledo, OH", "Austin, TX", 9800, "48x40x72"),
    ("Summit Chemicals", "PO-10426", "Akron, OH", "Houston, TX", 22000, "96x48x90"),
]

DOCUMENTS = [
    # tracking number, type, filename, size in bytes, status
    ("OLD-4491-2024", "BOL", "BOL_OLD-4491-2024.pdf", 184320, "Verified"),
    ("FDX-2211-2024", "BOL", "BOL_FDX-2211-2024.pdf", 172032, "Verified"),
    ("FDX-2211-2024", "POD", "POD_FDX-2211-2024_signed.pdf", 245760, "Verified"),
    ("EST-9944-2024", "Other", "Exception_Report_EST-9944.pdf", 98304, "Uploaded"),
]

INVOICES = [
    # tracking number, invoice number, quoted, actual, status, due date
    ("OLD-4491-2024", "INV-ODFL-77812", 1240.00, 1240.00, "Approved", "2026-03-26"),
    ("XPO-8823-2024", "INV-XPO-40219", 2875.00, 3110.50, "Disputed", "2026-03-27"),
    ("FDX-2211-2024", "INV-FDX-99120", 685.00, 685.00, "Paid", "2026-03-23"),
    ("EST-9944-2024", "INV-EST-11873", 1590.00, 1745.25, "Pending", "2026-03-25"),
]

USERS = [
    # name, email, role, department, last login
    ("Dana Whitfield", "d.whitfield@thoron.io", "Admin", "Operations", "2026-02-25 08:12:00"),
    ("Luis Ortega", "l.ortega@thoron.io", "Dispatcher", "Dispatch", "2026-02-25 07:45:00"),
    ("Priya Raman", "p.raman@thoron.io", "Dispatcher", "Dispatch", "2026-02-24 16:20:00"),
    ("Kevin Marsh", "k.marsh@thoron.io", "Driver", "Fleet", "2026-02-24 05:30:00"),
    ("Acme Shipping Desk", "shipping@acme-mfg.com", "Customer", None, None),
]


def _ts(value):
    return datetime.strptime(value, "%Y-%m-%d %H:%M:%S") if value else None


def _is_empty(db: Session, model) -> bool:
    return db.scalar(select(func.count()).select_from(model)) == 0


def seed_demo_data(db: Session) -> dict:
    """Seed every empty table; returns the number of rows inserted per table."""
    seeded = {}
    with transaction(db):
        if _is_empty(db, Carrier):
            db.add_all([
                Carrier(
                    name=c[0], mc_number=c[1], dot_number=c[2], contact_name=c[3],
                    contact_email=c[4], contact_phone=c[5], insurance_limit=c[6],
                    service_level=c[7], modes=c[8], on_time_rate=c[9], claim_rate=c[10],
                    rating=c[11], status=c[12],
                )
                for c in CARRIERS
            ])
            db.flush()
            seeded["carriers"] = len(CARRIERS)
        carriers = {c.name: c.id for c in db.scalars(select(Carrier))}

        if _is_empty(db, Shipment):
            db.add_all([
                Shipment(
                    origin=s[0], destination=s[1], weight=s[2], dimensions=s[3],
                    freight_class=s[4], status=s[5], carrier_id=carriers.get(s[6]),
                    tracking_number=s[7], estimated_delivery=s[8],
                )
                for s in SHIPMENTS
            ])
            db.flush()
            seeded["shipments"] = len(SHIPMENTS)
        shipments = {
            s.tracking_number: s for s in db.scalars(select(Shipment)) if s.tracking_number
        }

        if _is_empty(db, ShipmentEvent):
            events = [
                ShipmentEvent(
                    shipment_id=shipments[tn].id, event_type=e[0], location=e[1],
                    message=e[2], event_time=_ts(e[3]),
                )
                for tn, timeline in SHIPMENT_EVENTS.items() if tn in shipments
                for e in timeline
            ]
            db.add_all(events)
            seeded["shipment_events"] = len(events)

        if _is_empty(db, Order):
            db.add_all([
                Order(
                    customer_name=o[0], po_number=o[1], origin=o[2],
                    destination=o[3], weight=o[4], dimensions=o[5],
                )
                for o in ORDERS
            ])
            seeded["orders"] = len(ORDERS)

        if _is_empty(db, Document):
            docs = [
                Document(shipment_id=shipments[d[0]].id, type=d[1], filename=d[2], size=d[3], status=d[4])
                for d in DOCUMENTS if d[0] in shipments
            ]
            db.add_all(docs)
            seeded["documents"] = len(docs)

        if _is_empty(db, Invoice):
            invoices = [
                Invoice(
                    shipment_id=shipments[i[0]].id, carrier_id=shipments[i[0]].carrier_id,
                    invoice_number=i[1], quoted_amount=i[2], actual_amount=i[3],
                    status=i[4], due_date=i[5],
                )
                for i in INVOICES if i[0] in shipments
            ]
            db.add_all(invoices)
            seeded["invoices"] = len(invoices)

        if _is_empty(db, User):
            db.add_all([
                User(name=u[0], email=u[1], role=u[2], department=u[3], last_login=_ts(u[4]))
                for u in USERS
            ])
            seeded["users"] = len(USERS)

    if seeded:
        logger.info("Seeded demo data", extra={'extra_fields': seeded})
    return seeded
