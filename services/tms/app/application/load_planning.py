"""
Load planning: consolidate Unplanned orders into a single shipment.

The shipment insert and the order reassignment happen in one transaction.
Every validation runs before the first write, and any storage error rolls
the whole operation back, so a shipment never exists without its orders.
"""

from typing import Optional
from fastapi import HTTPException
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core_settings import get_settings
from app.domain.models import Order, Shipment, ORDER_PLANNED, ORDER_UNPLANNED
from app.infrastructure.db import transaction
from shared.core import get_logger
from .schemas import LoadPlanRequest, LoadPlanResult

logger = get_logger(__name__)

class LoadPlanner:
    def __init__(self, db: Session, max_weight_lbs: Optional[float] = None):
        self.db = db
        if max_weight_lbs is None:
            max_weight_lbs = get_settings().MAX_TRUCKLOAD_WEIGHT_LBS
        self.max_weight_lbs = max_weight_lbs

    def plan_load(self, data: LoadPlanRequest) -> LoadPlanResult:
        # Keep the caller's selection order; it decides default origin/destination
        order_ids = list(dict.fromkeys(data.order_ids))
        if not order_ids:
            raise HTTPException(status_code=400, detail="orderIds must contain at least one order")

        try:
            with transaction(self.db):
                orders = self._lock_orders(order_ids)
                combined_weight = self._validate(orders, data.weight)

                shipment = Shipment(
                    origin=data.origin or orders[0].origin,
                    destination=data.destination or orders[-1].destination,
                    weight=data.weight if data.weight is not None else combined_weight,
                    dimensions=data.dimensions or f"{len(orders)} Orders Consolidated",
                    status="Pending",
                )
                self.db.add(shipment)
                self.db.flush()  # assign id

                assigned = self._assign_orders(order_ids, shipment.id)
                if assigned != len(order_ids):
                    # Another planner claimed some of these orders after our read
                    raise HTTPException(
                        status_code=409,
                        detail="One or more orders were planned by a concurrent request",
                    )
                for order in orders:
                    self.db.expire(order)
        except SQLAlchemyError as e:
            logger.error(
                "Load planning aborted by storage error",
                exc_info=True,
                extra={'extra_fields': {'order_ids': order_ids}},
            )
            raise HTTPException(
                status_code=503,
                detail="Storage error while planning load; no changes were made, retry the request",
            ) from e

        logger.info(
            f"Planned shipment {shipment.id} from {len(order_ids)} orders",
            extra={'extra_fields': {
                'shipment_id': shipment.id,
                'order_ids': order_ids,
                'weight': shipment.weight,
            }},
        )
        return LoadPlanResult(shipment_id=shipment.id, order_ids=order_ids, weight=shipment.weight)

    def _lock_orders(self, order_ids: list[int]) -> list[Order]:
        rows = self.db.execute(
            select(Order).where(Order.id.in_(order_ids)).with_for_update()
        ).scalars().all()
        by_id = {o.id: o for o in rows}
        missing = [i for i in order_ids if i not in by_id]
        if missing:
            raise HTTPException(status_code=404, detail=f"Orders not found: {missing}")
        return [by_id[i] for i in order_ids]

    def _validate(self, orders: list[Order], requested_weight: Optional[float]) -> float:
        already_planned = [o.id for o in orders if o.status != ORDER_UNPLANNED]
        if already_planned:
            raise HTTPException(status_code=409, detail=f"Orders are not Unplanned: {already_planned}")

        combined_weight = sum(o.weight for o in orders)
        if requested_weight is not None and requested_weight < combined_weight:
            raise HTTPException(
                status_code=422,
                detail=(
                    f"Load weight {requested_weight:,.0f} lbs is below the combined order "
                    f"weight of {combined_weight:,.0f} lbs"
                ),
            )
        heaviest = max(combined_weight, requested_weight or 0)
        if heaviest > self.max_weight_lbs:
            raise HTTPException(
                status_code=422,
                detail=(
                    f"Load weight {heaviest:,.0f} lbs exceeds the legal truckload limit "
                    f"of {self.max_weight_lbs:,.0f} lbs"
                ),
            )
        return combined_weight

    def _assign_orders(self, order_ids: list[int], shipment_id: int) -> int:
        result = self.db.execute(
            update(Order)
            .where(Order.id.in_(order_ids), Order.status == ORDER_UNPLANNED)
            .values(status=ORDER_PLANNED, shipment_id=shipment_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
