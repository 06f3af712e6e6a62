from datetime import datetime
from app.domain.models import Invoice, User


def test_document_upload_lifecycle(client, make_shipment):
    shipment = make_shipment(tracking_number="FDX-2211-2024")

    resp = client.post('/api/documents/', json={
        "shipmentId": shipment.id,
        "type": "POD",
        "filename": "POD_FDX-2211-2024_signed.pdf",
        "size": 245760,
    })
    assert resp.status_code == 201
    doc = resp.json()
    assert doc["status"] == "Uploaded"
    assert doc["trackingNumber"] == "FDX-2211-2024"

    listed = client.get('/api/documents/').json()
    assert [d["filename"] for d in listed] == ["POD_FDX-2211-2024_signed.pdf"]

    assert client.delete(f'/api/documents/{doc["id"]}').status_code == 204
    assert client.get('/api/documents/').json() == []
    assert client.delete(f'/api/documents/{doc["id"]}').status_code == 404


def test_document_validation(client, make_shipment):
    shipment = make_shipment()
    resp = client.post('/api/documents/', json={"shipmentId": shipment.id, "type": "Photo", "filename": "x.jpg"})
    assert resp.status_code == 400
    resp = client.post('/api/documents/', json={"shipmentId": 999, "type": "BOL", "filename": "bol.pdf"})
    assert resp.status_code == 404


def test_invoices_joined_with_shipment_and_carrier(client, db, make_carrier, make_shipment):
    carrier = make_carrier("XPO Logistics")
    shipment = make_shipment(origin="Atlanta, GA", destination="Los Angeles, CA",
                             carrier_id=carrier.id, tracking_number="XPO-8823-2024")
    db.add(Invoice(shipment_id=shipment.id, carrier_id=carrier.id, invoice_number="INV-XPO-40219",
                   quoted_amount=2875.00, actual_amount=3110.50))
    db.commit()

    invoices = client.get('/api/invoices/').json()
    assert len(invoices) == 1
    assert invoices[0]["carrierName"] == "XPO Logistics"
    assert invoices[0]["origin"] == "Atlanta, GA"
    assert invoices[0]["status"] == "Pending"

    resp = client.put(f'/api/invoices/{invoices[0]["id"]}/status', json={"status": "Disputed"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "Disputed"
    assert resp.json()["trackingNumber"] == "XPO-8823-2024"


def test_invoice_status_validation(client):
    assert client.put('/api/invoices/1/status', json={"status": "Lost"}).status_code == 400
    assert client.put('/api/invoices/1/status', json={"status": "Paid"}).status_code == 404


def test_users_role_change(client, db):
    db.add_all([
        User(name="Luis Ortega", email="l.ortega@thoron.io", role="Dispatcher", last_login=datetime(2026, 2, 25, 7, 45)),
        User(name="Dana Whitfield", email="d.whitfield@thoron.io", role="Admin"),
    ])
    db.commit()

    users = client.get('/api/users/').json()
    assert [u["name"] for u in users] == ["Dana Whitfield", "Luis Ortega"]

    luis = users[1]
    resp = client.put(f'/api/users/{luis["id"]}/role', json={"role": "Driver"})
    assert resp.status_code == 200
    assert resp.json()["role"] == "Driver"

    assert client.put(f'/api/users/{luis["id"]}/role', json={"role": "Owner"}).status_code == 400
    assert client.put('/api/users/999/role', json={"role": "Admin"}).status_code == 404


def test_quotes_are_sorted_by_score(client):
    resp = client.post('/api/quotes/', json={"origin": "Chicago, IL", "destination": "Dallas, TX", "weight": 1200})
    assert resp.status_code == 200
    quotes = resp.json()
    assert [q["score"] for q in quotes] == [98, 95, 88]
    assert quotes[0]["carrier"] == "Old Dominion"
    assert quotes[0]["transitDays"] == 2
