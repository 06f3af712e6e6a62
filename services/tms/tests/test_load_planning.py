import pytest
from fastapi import HTTPException
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from app.application.load_planning import LoadPlanner
from app.application.schemas import LoadPlanRequest
from app.domain.models import Order, Shipment


def plan(db, order_ids, **kwargs):
    return LoadPlanner(db).plan_load(LoadPlanRequest(order_ids=order_ids, **kwargs))


def test_consolidates_orders_into_pending_shipment(db, make_order, row_count):
    first = make_order(4500)
    second = make_order(6200)

    result = plan(
        db, [first.id, second.id],
        origin="Cleveland, OH", destination="Houston, TX",
        weight=10700, dimensions="2 Orders Consolidated",
    )

    assert row_count(Shipment) == 1
    shipment = db.get(Shipment, result.shipment_id)
    assert shipment.status == "Pending"
    assert shipment.weight == 10700
    assert shipment.origin == "Cleveland, OH"
    assert shipment.destination == "Houston, TX"
    assert shipment.dimensions == "2 Orders Consolidated"

    db.expire_all()
    for order_id in (first.id, second.id):
        order = db.get(Order, order_id)
        assert order.status == "Planned"
        assert order.shipment_id == result.shipment_id


def test_defaults_come_from_selected_orders(db, make_order):
    first = make_order(3000, origin="Toledo, OH", destination="Austin, TX")
    second = make_order(2000, origin="Akron, OH", destination="Dallas, TX")

    result = plan(db, [second.id, first.id])

    shipment = db.get(Shipment, result.shipment_id)
    assert shipment.origin == "Akron, OH"
    assert shipment.destination == "Austin, TX"
    assert shipment.weight == 5000
    assert shipment.dimensions == "2 Orders Consolidated"
    assert result.order_ids == [second.id, first.id]


def test_duplicate_ids_count_once(db, make_order):
    order = make_order(4000)

    result = plan(db, [order.id, order.id])

    assert result.order_ids == [order.id]
    assert result.weight == 4000


def test_empty_selection_is_rejected(db, row_count):
    with pytest.raises(HTTPException) as exc:
        plan(db, [])

    assert exc.value.status_code == 400
    assert row_count(Shipment) == 0


def test_combined_weight_over_limit_is_rejected(db, make_order, row_count):
    orders = [make_order(20000), make_order(20000), make_order(5001)]

    with pytest.raises(HTTPException) as exc:
        plan(db, [o.id for o in orders], weight=100)

    assert exc.value.status_code == 422
    assert row_count(Shipment) == 0
    db.expire_all()
    assert all(db.get(Order, o.id).status == "Unplanned" for o in orders)


def test_requested_weight_over_limit_is_rejected(db, make_order, row_count):
    order = make_order(1000)

    with pytest.raises(HTTPException) as exc:
        plan(db, [order.id], weight=45001)

    assert exc.value.status_code == 422
    assert row_count(Shipment) == 0


def test_requested_weight_below_combined_is_rejected(db, make_order, row_count):
    orders = [make_order(30000), make_order(14000)]

    with pytest.raises(HTTPException) as exc:
        plan(db, [o.id for o in orders], weight=10)

    assert exc.value.status_code == 422
    assert row_count(Shipment) == 0
    db.expire_all()
    assert all(db.get(Order, o.id).status == "Unplanned" for o in orders)


def test_requested_weight_above_combined_is_kept(db, make_order):
    order = make_order(4000)

    result = plan(db, [order.id], weight=4250)

    assert result.weight == 4250


def test_exact_truckload_limit_is_allowed(db, make_order):
    orders = [make_order(25000), make_order(20000)]

    result = plan(db, [o.id for o in orders])

    assert result.weight == 45000


def test_limit_is_configurable(db, make_order):
    order = make_order(12000)

    with pytest.raises(HTTPException) as exc:
        LoadPlanner(db, max_weight_lbs=10000).plan_load(LoadPlanRequest(order_ids=[order.id]))

    assert exc.value.status_code == 422


def test_unknown_orders_are_rejected(db, make_order, row_count):
    order = make_order(1000)

    with pytest.raises(HTTPException) as exc:
        plan(db, [order.id, 999])

    assert exc.value.status_code == 404
    assert "999" in exc.value.detail
    assert row_count(Shipment) == 0
    db.expire_all()
    assert db.get(Order, order.id).status == "Unplanned"


def test_replanning_planned_orders_is_rejected(db, make_order, row_count):
    first = make_order(4500)
    second = make_order(6200)
    original = plan(db, [first.id, second.id])

    with pytest.raises(HTTPException) as exc:
        plan(db, [first.id, second.id])

    assert exc.value.status_code == 409
    assert row_count(Shipment) == 1
    db.expire_all()
    assert db.get(Order, first.id).shipment_id == original.shipment_id


def test_storage_failure_rolls_back_shipment(db, make_order, row_count, monkeypatch):
    first = make_order(4500)
    second = make_order(6200)

    def failing_update(self, order_ids, shipment_id):
        raise OperationalError("UPDATE orders", {}, Exception("disk I/O error"))

    monkeypatch.setattr(LoadPlanner, "_assign_orders", failing_update)

    with pytest.raises(HTTPException) as exc:
        plan(db, [first.id, second.id])

    assert exc.value.status_code == 503
    assert row_count(Shipment) == 0
    db.expire_all()
    assert db.get(Order, first.id).status == "Unplanned"
    assert db.get(Order, second.id).shipment_id is None


def test_concurrently_planned_order_aborts_whole_plan(db, make_order, row_count, monkeypatch):
    first = make_order(4500)
    second = make_order(6200)
    assign = LoadPlanner._assign_orders

    def racing_update(self, order_ids, shipment_id):
        # Another request wins the first order between our read and our write
        self.db.execute(text("UPDATE orders SET status = 'Planned' WHERE id = :id"), {"id": first.id})
        return assign(self, order_ids, shipment_id)

    monkeypatch.setattr(LoadPlanner, "_assign_orders", racing_update)

    with pytest.raises(HTTPException) as exc:
        plan(db, [first.id, second.id])

    assert exc.value.status_code == 409
    assert row_count(Shipment) == 0
    db.expire_all()
    assert db.get(Order, first.id).status == "Unplanned"
    assert db.get(Order, second.id).status == "Unplanned"
