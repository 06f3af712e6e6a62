from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.domain.models import Carrier, Invoice, Shipment
from .schemas import CarrierCreate, CarrierUpdate

class CarrierService:
    def __init__(self, db: Session):
        self.db = db

    def list(self):
        return self.db.query(Carrier).order_by(Carrier.rating.desc(), Carrier.id).all()

    def get(self, carrier_id: int):
        carrier = self.db.query(Carrier).filter(Carrier.id == carrier_id).first()
        if not carrier:
            raise HTTPException(status_code=404, detail="Carrier not found")
        return carrier

    def create(self, data: CarrierCreate):
        # Unset optionals fall through to the column defaults
        payload = {k: v for k, v in data.model_dump().items() if v is not None}
        carrier = Carrier(**payload)
        self.db.add(carrier)
        self.db.commit()
        self.db.refresh(carrier)
        return carrier

    def update(self, carrier_id: int, data: CarrierUpdate):
        carrier = self.get(carrier_id)
        # Explicit nulls leave the stored value alone
        changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        for key, value in changes.items():
            setattr(carrier, key, value)
        self.db.commit()
        self.db.refresh(carrier)
        return carrier

    def delete(self, carrier_id: int) -> None:
        carrier = self.get(carrier_id)
        in_use = (
            self.db.query(Shipment.id).filter(Shipment.carrier_id == carrier_id).first()
            or self.db.query(Invoice.id).filter(Invoice.carrier_id == carrier_id).first()
        )
        if in_use:
            raise HTTPException(
                status_code=409,
                detail="Carrier is referenced by shipments or invoices and cannot be deleted",
            )
        self.db.delete(carrier)
        self.db.commit()
