from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.shipments import ShipmentService
from app.application.schemas import ShipmentCreate, ShipmentRead

router = APIRouter(prefix="/api/shipments", tags=["shipments"])

@router.get("/", response_model=list[ShipmentRead])
def list_shipments(db: Session = Depends(get_db)):
    return ShipmentService(db).list()

@router.post("/", response_model=ShipmentRead, status_code=201)
def create_shipment(payload: ShipmentCreate, db: Session = Depends(get_db)):
    return ShipmentService(db).create(payload)
