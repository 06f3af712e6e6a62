from typing import Optional
from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.domain.models import Order, ORDER_STATUSES, ORDER_UNPLANNED
from .schemas import OrderCreate

class OrderService:
    def __init__(self, db: Session):
        self.db = db

    def list(self, status: Optional[str] = None):
        query = self.db.query(Order)
        if status:
            if status not in ORDER_STATUSES:
                raise HTTPException(status_code=400, detail=f"Unknown order status '{status}'")
            query = query.filter(Order.status == status)
        return query.order_by(Order.created_at.desc(), Order.id.desc()).all()

    def get(self, order_id: int):
        return self.db.query(Order).filter(Order.id == order_id).first()

    def create(self, data: OrderCreate):
        # Intake always starts orders Unplanned; only load planning moves them on
        order = Order(**data.model_dump(), status=ORDER_UNPLANNED)
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order
