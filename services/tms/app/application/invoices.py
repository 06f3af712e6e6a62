from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.domain.models import Carrier, Invoice, Shipment, INVOICE_STATUSES
from .schemas import InvoiceRead

class InvoiceService:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[dict]:
        rows = (
            self.db.query(Invoice, Shipment, Carrier.name)
            .join(Shipment, Invoice.shipment_id == Shipment.id)
            .outerjoin(Carrier, Invoice.carrier_id == Carrier.id)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .all()
        )
        return [self._enrich(inv, shipment, carrier_name) for inv, shipment, carrier_name in rows]

    def update_status(self, invoice_id: int, status: str) -> dict:
        if status not in INVOICE_STATUSES:
            raise HTTPException(status_code=400, detail=f"Unknown invoice status '{status}'")
        invoice = self.db.get(Invoice, invoice_id)
        if invoice is None:
            raise HTTPException(status_code=404, detail="Invoice not found")

        invoice.status = status
        self.db.commit()
        self.db.refresh(invoice)
        return self._enrich(invoice, invoice.shipment, invoice.carrier.name if invoice.carrier else None)

    @staticmethod
    def _enrich(invoice: Invoice, shipment: Shipment, carrier_name) -> dict:
        row = InvoiceRead.model_validate(invoice).model_dump()
        row.update(
            tracking_number=shipment.tracking_number,
            origin=shipment.origin,
            destination=shipment.destination,
            carrier_name=carrier_name,
        )
        return row
