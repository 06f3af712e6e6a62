from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.carriers import CarrierService
from app.application.schemas import CarrierCreate, CarrierRead, CarrierUpdate

router = APIRouter(prefix="/api/carriers", tags=["carriers"])

@router.get("/", response_model=list[CarrierRead])
def list_carriers(db: Session = Depends(get_db)):
    """Carrier directory, best rated first."""
    return CarrierService(db).list()

@router.get("/{carrier_id}", response_model=CarrierRead)
def get_carrier(carrier_id: int, db: Session = Depends(get_db)):
    return CarrierService(db).get(carrier_id)

@router.post("/", response_model=CarrierRead, status_code=201)
def create_carrier(payload: CarrierCreate, db: Session = Depends(get_db)):
    return CarrierService(db).create(payload)

@router.put("/{carrier_id}", response_model=CarrierRead)
def update_carrier(carrier_id: int, payload: CarrierUpdate, db: Session = Depends(get_db)):
    return CarrierService(db).update(carrier_id, payload)

@router.delete("/{carrier_id}", status_code=204)
def delete_carrier(carrier_id: int, db: Session = Depends(get_db)):
    CarrierService(db).delete(carrier_id)
    return None
