from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.invoices import InvoiceService
from app.application.schemas import InvoiceRead, InvoiceStatusUpdate

router = APIRouter(prefix="/api/invoices", tags=["invoices"])

@router.get("/", response_model=list[InvoiceRead])
def list_invoices(db: Session = Depends(get_db)):
    return InvoiceService(db).list()

@router.put("/{invoice_id}/status", response_model=InvoiceRead)
def update_invoice_status(invoice_id: int, payload: InvoiceStatusUpdate, db: Session = Depends(get_db)):
    return InvoiceService(db).update_status(invoice_id, payload.status)
