from mailer import Mailer, order_subtotal, render_order_confirmation, send_order_confirmation

from conftest import RecordingMailer

ORDER = {
    "id": "64b7f0c2a1b2c3d4e5f60718",
    "clientName": "Amira <Ben>",
    "email": "amira@example.com",
    "products": [
        {"name": "Pendant lamp", "price": 100, "discountPrice": 80, "quantity": 2},
        {"name": "Bulb", "price": 50, "quantity": 1},
    ],
    "shippingCost": 7,
    "totalAmount": 217,
}


def test_subtotal_uses_discount_price_when_set():
    assert order_subtotal(ORDER["products"]) == 210
    assert order_subtotal([{"price": 10, "discountPrice": 0, "quantity": 3}]) == 30
    assert order_subtotal([]) == 0


def test_render_confirmation():
    subject, body = render_order_confirmation(ORDER)
    assert ORDER["id"] in subject
    assert "Pendant lamp x 2" in body
    assert "210.00" in body
    assert "217.00" in body
    assert "Amira &lt;Ben&gt;" in body


def test_send_records_message():
    mailer = RecordingMailer()
    assert send_order_confirmation(mailer, ORDER) is True
    assert mailer.sent[0]["to"] == "amira@example.com"


def test_send_failure_is_swallowed_and_logged(caplog):
    mailer = RecordingMailer(fail=True)
    assert send_order_confirmation(mailer, ORDER) is False
    assert "Could not send confirmation" in caplog.text


def test_no_email_no_message():
    mailer = RecordingMailer()
    assert send_order_confirmation(mailer, {**ORDER, "email": ""}) is False
    assert mailer.sent == []


def test_mailer_without_key_does_not_call_resend():
    assert Mailer(api_key="").send("a@example.com", "Hi", "<p>Hi</p>") is None


def test_render_shows_order_date():
    _, body = render_order_confirmation({**ORDER, "date": "14/07/2024"})
    assert "14/07/2024" in body
