from sqlalchemy import inspect
from app.domain.models import Carrier, Order, Shipment, ShipmentEvent, User
from app.infrastructure.db import init_models, make_engine
from app.infrastructure.migrations import run_migrations
from app.infrastructure.seed import seed_demo_data
from app.main import health_service


def test_seed_fills_empty_tables_once(db, row_count):
    seeded = seed_demo_data(db)

    assert seeded["carriers"] == 6
    assert seeded["shipments"] == 6
    assert row_count(ShipmentEvent) == seeded["shipment_events"] == 14
    assert row_count(User) == 5
    assert {o.status for o in db.query(Order)} == {"Unplanned"}
    old_dominion = db.query(Carrier).filter(Carrier.name == "Old Dominion Freight").one()
    assert db.query(Shipment).filter(Shipment.tracking_number == "OLD-4491-2024").one().carrier_id == old_dominion.id

    assert seed_demo_data(db) == {}
    assert row_count(Carrier) == 6


def test_seeded_demo_orders_can_be_planned(client, db):
    seed_demo_data(db)
    unplanned = client.get('/api/orders/', params={"status": "Unplanned"}).json()
    cleveland = [o["id"] for o in unplanned if o["destination"] == "Houston, TX" and o["origin"] == "Cleveland, OH"]

    resp = client.post('/api/orders/plan', json={"orderIds": cleveland})
    assert resp.status_code == 201
    assert resp.json()["weight"] == 10700


def test_migrations_build_schema_then_are_idempotent(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'tms.db'}")

    assert run_migrations(engine) == "upgraded"
    tables = set(inspect(engine).get_table_names())
    assert {"carriers", "lanes", "rates", "shipments", "shipment_events",
            "orders", "documents", "invoices", "users", "alembic_version"} <= tables

    assert run_migrations(engine) == "upgraded"
    engine.dispose()


def test_schema_without_history_is_stamped(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'legacy.db'}")
    init_models(engine)

    assert run_migrations(engine) == "stamped"
    assert inspect(engine).has_table("alembic_version")
    engine.dispose()


def test_health_endpoints(client, engine, monkeypatch):
    monkeypatch.setattr(health_service, "engine_factory", lambda: engine)

    resp = client.get('/api/health')
    assert resp.status_code == 200
    assert resp.json()["status"] == "pass"

    assert client.get('/api/health/live').json() == {"status": "alive"}

    ready = client.get('/api/health/ready').json()
    assert ready["checks"]["database:connectivity"]["status"] == "pass"

    startup = client.get('/api/health/startup')
    assert startup.json()["checks"]["database:migrations"]["status"] == "warn"


def test_request_id_is_echoed(client):
    resp = client.get('/api/health/live', headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"
