from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.domain.models import Document, Shipment, DOCUMENT_TYPES
from .schemas import DocumentCreate, DocumentRead

class DocumentService:
    """Shipment paperwork. Uploads are simulated: only metadata is stored."""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[dict]:
        rows = (
            self.db.query(Document, Shipment.tracking_number)
            .join(Shipment, Document.shipment_id == Shipment.id)
            .order_by(Document.uploaded_at.desc(), Document.id.desc())
            .all()
        )
        return [self._with_tracking(doc, tracking_number) for doc, tracking_number in rows]

    def create(self, data: DocumentCreate) -> dict:
        if data.type not in DOCUMENT_TYPES:
            raise HTTPException(status_code=400, detail=f"Unknown document type '{data.type}'")
        shipment = self.db.get(Shipment, data.shipment_id)
        if shipment is None:
            raise HTTPException(status_code=404, detail="Shipment not found")

        doc = Document(**data.model_dump())
        self.db.add(doc)
        self.db.commit()
        self.db.refresh(doc)
        return self._with_tracking(doc, shipment.tracking_number)

    def delete(self, document_id: int) -> None:
        doc = self.db.get(Document, document_id)
        if doc is None:
            raise HTTPException(status_code=404, detail="Document not found")
        self.db.delete(doc)
        self.db.commit()

    @staticmethod
    def _with_tracking(doc: Document, tracking_number) -> dict:
        row = DocumentRead.model_validate(doc).model_dump()
        row["tracking_number"] = tracking_number
        return row
