from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.tracking import TrackingService
from app.application.schemas import ShipmentEventCreate, ShipmentEventRead, TrackingDetail, TrackingSummary

router = APIRouter(prefix="/api/tracking", tags=["tracking"])

@router.get("/", response_model=list[TrackingSummary])
def list_tracking(db: Session = Depends(get_db)):
    """All shipments with carrier name and latest milestone."""
    return TrackingService(db).list()

@router.get("/{shipment_id}", response_model=TrackingDetail)
def get_tracking(shipment_id: int, db: Session = Depends(get_db)):
    """One shipment with its full milestone timeline."""
    return TrackingService(db).get(shipment_id)

@router.post("/{shipment_id}/events", response_model=ShipmentEventRead, status_code=201)
def add_tracking_event(shipment_id: int, payload: ShipmentEventCreate, db: Session = Depends(get_db)):
    return TrackingService(db).add_event(shipment_id, payload)
