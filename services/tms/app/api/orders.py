from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.orders import OrderService
from app.application.load_planning import LoadPlanner
from app.application.schemas import OrderCreate, OrderRead, LoadPlanRequest, LoadPlanResult

router = APIRouter(prefix="/api/orders", tags=["orders"])

@router.get("/", response_model=list[OrderRead])
def list_orders(status: Optional[str] = None, db: Session = Depends(get_db)):
    """List orders, newest first; ``?status=Unplanned`` feeds the load planner."""
    return OrderService(db).list(status)

@router.post("/plan", response_model=LoadPlanResult, status_code=201)
def plan_load(payload: LoadPlanRequest, db: Session = Depends(get_db)):
    """Consolidate Unplanned orders into one Pending shipment."""
    return LoadPlanner(db).plan_load(payload)

@router.get("/{order_id}", response_model=OrderRead)
def get_order(order_id: int, db: Session = Depends(get_db)):
    order = OrderService(db).get(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

@router.post("/", response_model=OrderRead, status_code=201)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    return OrderService(db).create(payload)
