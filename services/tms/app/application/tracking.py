from fastapi import HTTPException
from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session
from app.domain.models import Carrier, Shipment, ShipmentEvent
from .schemas import ShipmentEventCreate, ShipmentEventRead, ShipmentRead

class TrackingService:
    """Shipment milestones: the latest-event board and per-shipment timelines."""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[dict]:
        latest = (
            select(
                ShipmentEvent.shipment_id,
                ShipmentEvent.event_type,
                ShipmentEvent.location,
                ShipmentEvent.event_time,
                func.row_number().over(
                    partition_by=ShipmentEvent.shipment_id,
                    order_by=(ShipmentEvent.event_time.desc(), ShipmentEvent.id.desc()),
                ).label("rn"),
            )
            .subquery()
        )
        stmt = (
            select(Shipment, Carrier.name, latest.c.event_type, latest.c.location, latest.c.event_time)
            .outerjoin(Carrier, Shipment.carrier_id == Carrier.id)
            .outerjoin(latest, and_(latest.c.shipment_id == Shipment.id, latest.c.rn == 1))
            .order_by(Shipment.created_at.desc(), Shipment.id.desc())
        )
        rows = []
        for shipment, carrier_name, event_type, location, event_time in self.db.execute(stmt):
            row = ShipmentRead.model_validate(shipment).model_dump()
            row.update(
                carrier_name=carrier_name,
                last_event_type=event_type,
                last_location=location,
                last_event_time=event_time,
            )
            rows.append(row)
        return rows

    def get(self, shipment_id: int) -> dict:
        shipment = self._get_shipment(shipment_id)
        events = (
            self.db.query(ShipmentEvent)
            .filter(ShipmentEvent.shipment_id == shipment_id)
            .order_by(ShipmentEvent.event_time.asc(), ShipmentEvent.id.asc())
            .all()
        )
        detail = ShipmentRead.model_validate(shipment).model_dump()
        detail.update(
            carrier_name=shipment.carrier.name if shipment.carrier else None,
            carrier_phone=shipment.carrier.contact_phone if shipment.carrier else None,
            events=[ShipmentEventRead.model_validate(e).model_dump() for e in events],
        )
        return detail

    def add_event(self, shipment_id: int, data: ShipmentEventCreate) -> ShipmentEvent:
        self._get_shipment(shipment_id)
        event = ShipmentEvent(shipment_id=shipment_id, **data.model_dump())
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        return event

    def _get_shipment(self, shipment_id: int) -> Shipment:
        shipment = self.db.query(Shipment).filter(Shipment.id == shipment_id).first()
        if not shipment:
            raise HTTPException(status_code=404, detail="Shipment not found")
        return shipment
