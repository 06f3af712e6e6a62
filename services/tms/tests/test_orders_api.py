from app.domain.models import Order, Shipment


def test_list_orders_filters_by_status(client, make_order):
    make_order(4500, customer_name="Acme Manufacturing")
    make_order(6200, customer_name="Great Lakes Steel", status="Planned")

    resp = client.get('/api/orders/', params={"status": "Unplanned"})
    assert resp.status_code == 200
    body = resp.json()
    assert [o["customerName"] for o in body] == ["Acme Manufacturing"]
    assert body[0]["status"] == "Unplanned"
    assert body[0]["shipmentId"] is None

    resp = client.get('/api/orders/')
    assert len(resp.json()) == 2


def test_list_orders_rejects_unknown_status(client):
    resp = client.get('/api/orders/', params={"status": "Shipped"})
    assert resp.status_code == 400


def test_create_order_starts_unplanned(client):
    resp = client.post('/api/orders/', json={
        "customerName": "Buckeye Plastics",
        "poNumber": "PO-10425",
        "origin": "Toledo, OH",
        "destination": "Austin, TX",
        "weight": 9800,
        "dimensions": "48x40x72",
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "Unplanned"
    assert body["poNumber"] == "PO-10425"

    resp = client.get(f'/api/orders/{body["id"]}')
    assert resp.status_code == 200
    assert resp.json()["customerName"] == "Buckeye Plastics"


def test_get_missing_order(client):
    assert client.get('/api/orders/12345').status_code == 404


def test_plan_load_endpoint(client, db, make_order):
    first = make_order(4500)
    second = make_order(6200)

    resp = client.post('/api/orders/plan', json={
        "orderIds": [first.id, second.id],
        "origin": "Cleveland, OH",
        "destination": "Houston, TX",
        "weight": 10700,
        "dimensions": "2 Orders Consolidated",
    })
    assert resp.status_code == 201
    body = resp.json()
    shipment_id = body["shipmentId"]
    assert body["orderIds"] == [first.id, second.id]

    shipments = client.get('/api/shipments/').json()
    assert [(s["id"], s["weight"], s["status"]) for s in shipments] == [(shipment_id, 10700, "Pending")]

    planned = client.get('/api/orders/', params={"status": "Planned"}).json()
    assert {o["id"] for o in planned} == {first.id, second.id}
    assert {o["shipmentId"] for o in planned} == {shipment_id}


def test_plan_load_empty_selection(client, db, row_count):
    resp = client.post('/api/orders/plan', json={"orderIds": []})
    assert resp.status_code == 400
    assert row_count(Shipment) == 0


def test_plan_load_missing_selection(client, row_count):
    resp = client.post('/api/orders/plan', json={"origin": "Cleveland, OH"})
    assert resp.status_code == 400
    assert row_count(Shipment) == 0


def test_plan_load_overweight(client, db, make_order, row_count):
    orders = [make_order(30000), make_order(16000)]

    resp = client.post('/api/orders/plan', json={"orderIds": [o.id for o in orders]})
    assert resp.status_code == 422
    assert "45,000" in resp.json()["detail"]
    assert row_count(Shipment) == 0
    db.expire_all()
    assert all(db.get(Order, o.id).status == "Unplanned" for o in orders)


def test_plan_load_twice_conflicts(client, make_order, row_count):
    order = make_order(4500)

    assert client.post('/api/orders/plan', json={"orderIds": [order.id]}).status_code == 201
    resp = client.post('/api/orders/plan', json={"orderIds": [order.id]})
    assert resp.status_code == 409
    assert row_count(Shipment) == 1
