from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.domain.freight_class import freight_class_for, parse_dimensions
from app.domain.models import Carrier, Shipment, SHIPMENT_STATUSES
from .schemas import ShipmentCreate

class ShipmentService:
    def __init__(self, db: Session):
        self.db = db

    def list(self):
        return self.db.query(Shipment).order_by(Shipment.id).all()

    def get(self, shipment_id: int):
        return self.db.query(Shipment).filter(Shipment.id == shipment_id).first()

    def create(self, data: ShipmentCreate):
        payload = data.model_dump(exclude_unset=True)
        status = payload.get("status") or "Pending"
        if status not in SHIPMENT_STATUSES:
            raise HTTPException(status_code=400, detail=f"Unknown shipment status '{status}'")
        payload["status"] = status

        carrier_id = payload.get("carrier_id")
        if carrier_id is not None and self.db.get(Carrier, carrier_id) is None:
            raise HTTPException(status_code=404, detail="Carrier not found")

        if not payload.get("freight_class"):
            # Derive the NMFC class when the dimensions are a single LxWxH piece
            dims = parse_dimensions(payload.get("dimensions"))
            if dims:
                payload["freight_class"] = freight_class_for(payload["weight"], *dims)

        obj = Shipment(**payload)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj
