import re

import pytest
from bson import ObjectId

from main import get_mailer, app

from conftest import RecordingMailer


def order_payload(**overrides):
    payload = {
        "clientName": "Amira Ben Salah",
        "city": "Tunis",
        "email": "amira@example.com",
        "phoneNumber": "12345678",
        "shippingAddress": "12 Rue de Marseille",
        "totalAmount": 217,
        "shippingCost": 7,
        "products": [
            {"productId": str(ObjectId()), "name": "Pendant lamp", "price": 100, "discountPrice": 80,
             "quantity": 2, "variants": {"Color": "Gold"}},
            {"_id": str(ObjectId()), "name": "Bulb", "price": 50, "quantity": 1},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_order_sends_confirmation(client, mailer):
    res = client.post("/api/orders", json=order_payload(status="delivered"))
    assert res.status_code == 201
    order = res.json()
    assert order["status"] == "pending"
    assert order["paymentStatus"] == "unpaid"
    assert order["code"] == "N/A"
    assert order["products"][0]["variants"] == {"Size": None, "Color": "Gold"}
    assert order["products"][1]["discountPrice"] is None

    assert len(mailer.sent) == 1
    sent = mailer.sent[0]
    assert sent["to"] == "amira@example.com"
    assert order["id"] in sent["subject"]
    assert "210.00" in sent["html"]


def test_mail_failure_does_not_fail_the_order(client, db):
    app.dependency_overrides[get_mailer] = lambda: RecordingMailer(fail=True)
    res = client.post("/api/orders", json=order_payload())
    assert res.status_code == 201
    assert db["order"].count_documents({}) == 1


@pytest.mark.parametrize("field", ["clientName", "city", "email", "phoneNumber", "shippingAddress", "totalAmount", "products"])
def test_required_fields(client, field):
    payload = order_payload()
    del payload[field]
    assert client.post("/api/orders", json=payload).status_code == 400


def test_invalid_values(client):
    assert client.post("/api/orders", json=order_payload(products=[])).status_code == 400
    assert client.post("/api/orders", json=order_payload(email="nope")).status_code == 400
    bad_line = order_payload(products=[{"productId": "123", "price": 1, "quantity": 1}])
    assert client.post("/api/orders", json=bad_line).status_code == 400


def test_read_update_delete(client):
    order = client.post("/api/orders", json=order_payload()).json()
    oid = order["id"]

    assert client.get(f"/api/orders/{oid}").json()["clientName"] == "Amira Ben Salah"
    assert [o["id"] for o in client.get("/api/orders").json()] == [oid]

    res = client.put(f"/api/orders/{oid}", json={"status": "shipped", "paymentStatus": "paid"})
    assert res.status_code == 200
    assert res.json()["status"] == "shipped"
    assert res.json()["paymentStatus"] == "paid"
    assert res.json()["totalAmount"] == 217

    assert client.put(f"/api/orders/{oid}", json={"status": "   "}).status_code == 400
    assert client.put(f"/api/orders/{oid}", json={}).status_code == 400
    assert client.put(f"/api/orders/{ObjectId()}", json={"status": "delivered"}).status_code == 404

    assert client.delete(f"/api/orders/{oid}").status_code == 200
    assert client.get(f"/api/orders/{oid}").status_code == 404
    assert client.delete(f"/api/orders/{oid}").status_code == 404


def test_order_date(client, mailer):
    order = client.post("/api/orders", json=order_payload()).json()
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4}", order["date"])
    assert order["date"] in mailer.sent[0]["html"]

    order = client.post("/api/orders", json=order_payload(date="03/02/2024")).json()
    assert order["date"] == "03/02/2024"
    assert "03/02/2024" in mailer.sent[1]["html"]
