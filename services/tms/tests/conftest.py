import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app as tms_app
from app.domain.models import Carrier, Order, Shipment
from app.infrastructure.db import get_db, init_models, make_engine


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_models(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    tms_app.dependency_overrides[get_db] = override_get_db
    yield TestClient(tms_app)
    tms_app.dependency_overrides.clear()


@pytest.fixture
def make_order(db):
    def _make(weight, origin="Cleveland, OH", destination="Houston, TX", customer_name="Acme Manufacturing", **kwargs):
        order = Order(customer_name=customer_name, origin=origin, destination=destination, weight=weight, **kwargs)
        db.add(order)
        db.commit()
        return order
    return _make


@pytest.fixture
def make_carrier(db):
    def _make(name="FedEx Freight", **kwargs):
        carrier = Carrier(name=name, **kwargs)
        db.add(carrier)
        db.commit()
        return carrier
    return _make


@pytest.fixture
def make_shipment(db):
    def _make(origin="Chicago, IL", destination="Dallas, TX", weight=1850, **kwargs):
        shipment = Shipment(origin=origin, destination=destination, weight=weight, **kwargs)
        db.add(shipment)
        db.commit()
        return shipment
    return _make


@pytest.fixture
def row_count(db):
    def _count(model) -> int:
        return db.scalar(select(func.count()).select_from(model))
    return _count
