"""
Order confirmation emails, sent through Resend.
"""
import html
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import resend

logger = logging.getLogger(__name__)

RESEND_API_KEY = (os.getenv("RESEND_API_KEY") or "").strip()
EMAIL_FROM = os.getenv("EMAIL_FROM", "orders@example.com")
SHOP_NAME = os.getenv("SHOP_NAME", "Shop")
CURRENCY = os.getenv("CURRENCY", "TND")
DEFAULT_SHIPPING_COST = float(os.getenv("DEFAULT_SHIPPING_COST", "7.00"))


class Mailer:
    def __init__(self, api_key: str = RESEND_API_KEY, sender: str = EMAIL_FROM):
        self.api_key = api_key
        self.sender = sender

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def send(self, to: str, subject: str, html_body: str) -> Optional[Dict[str, Any]]:
        if not self.enabled:
            logger.warning("RESEND_API_KEY is not set, not sending %r to %s", subject, to)
            return None
        resend.api_key = self.api_key
        payload = {
            "from": self.sender,
            "to": [to],
            "subject": subject,
            "html": html_body,
        }
        response = resend.Emails.send(payload)
        logger.info("Sent %r to %s", subject, to)
        return response


def line_price(line: Dict[str, Any]) -> float:
    return float(line.get("discountPrice") or line.get("price") or 0)


def order_subtotal(lines: List[Dict[str, Any]]) -> float:
    """Sum of unit price (discounted when set) times quantity."""
    return sum(line_price(line) * int(line.get("quantity") or 0) for line in lines)


def _money(value: float) -> str:
    return f"{value:.2f} {CURRENCY}"


def render_order_confirmation(order: Dict[str, Any]) -> Tuple[str, str]:
    """Subject and HTML body for a stored order (serialized, with ``id``)."""
    lines = order.get("products") or []
    subtotal = order_subtotal(lines)
    shipping = order.get("shippingCost")
    if shipping is None:
        shipping = DEFAULT_SHIPPING_COST
    order_id = html.escape(str(order.get("id", "")))

    rows = "".join(
        f'<tr><td style="padding: 8px 0;">{html.escape(str(line.get("name") or ""))} x {int(line.get("quantity") or 0)}</td>'
        f'<td style="padding: 8px 0; text-align: right;">{_money(line_price(line))}</td></tr>'
        for line in lines
    )

    subject = f"Order confirmation #{order.get('id', '')}"
    body = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="font-size: 18px;">Order confirmation <span>#{order_id}</span></h2>
  <p style="font-size: 13px;">{html.escape(str(order.get("date") or ""))}</p>
  <p>Hello <strong>{html.escape(str(order.get("clientName") or ""))}</strong>,</p>
  <p>Thank you for your order at <strong>{html.escape(SHOP_NAME)}</strong>.</p>
  <table style="width: 100%; border-collapse: collapse;">{rows}</table>
  <p>Subtotal: <strong>{_money(subtotal)}</strong></p>
  <p>Shipping: <strong>{_money(float(shipping))}</strong></p>
  <p style="font-weight: bold;">Total: {_money(float(order.get("totalAmount") or 0))}</p>
  <p>Your order is being prepared. We will email you again once it ships.</p>
  <p style="font-size: 11px; color: #888;">This message was sent automatically, please do not reply.</p>
</div>
"""
    return subject, body


def send_order_confirmation(mailer: Mailer, order: Dict[str, Any]) -> bool:
    """Email the confirmation. Failures are logged, never raised."""
    if not order.get("email"):
        return False
    try:
        subject, body = render_order_confirmation(order)
        mailer.send(order["email"], subject, body)
    except Exception:
        logger.exception("Could not send confirmation for order %s", order.get("id"))
        return False
    return True
