import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from twilio.rest import Client

from .models import Order

logger = logging.getLogger(__name__)


@dataclass
class Sent:
    sid: Optional[str] = None


@dataclass
class DeliveryFailed:
    error: str


DeliveryResult = Union[Sent, DeliveryFailed]


def _amount(value):
    return int(value) if float(value).is_integer() else value


def format_order_message(order: Order) -> str:
    items_text = ", ".join(f"{i.name}: {i.qty}" for i in order.items)
    return (
        f"📦 New Order from {order.name}\n"
        f"Phone: {order.phone}\n"
        f"Items: {items_text}\n"
        f"Total: ₹{_amount(order.total)}\n"
        f"Location: {order.location}"
    )


class SmsNotifier:
    """Texts a summary of each new order to the admin phone. Never retries."""

    def __init__(self, client, from_phone, to_phone):
        self.client = client
        self.from_phone = from_phone
        self.to_phone = to_phone

    @classmethod
    def from_env(cls):
        sid, token = os.getenv("TWILIO_SID"), os.getenv("TWILIO_AUTH_TOKEN")
        client = Client(sid, token) if sid and token else None
        if client is None:
            logger.warning("TWILIO_SID / TWILIO_AUTH_TOKEN not set, order SMS will not be sent")
        return cls(client, os.getenv("TWILIO_PHONE"), os.getenv("ADMIN_PHONE"))

    def notify(self, order: Order) -> DeliveryResult:
        if self.client is None:
            return DeliveryFailed(error="SMS provider not configured")
        try:
            message = self.client.messages.create(
                body=format_order_message(order),
                from_=self.from_phone,
                to=self.to_phone,
            )
        except Exception as e:
            # Any provider problem (auth, bad number, network) is reported, not raised
            error = getattr(e, "msg", None) or str(e)
            logger.error(f"SMS sending failed: {error}")
            return DeliveryFailed(error=error)

        sid = getattr(message, "sid", None)
        logger.info(f"SMS sent to admin for order from {order.name} (sid={sid})")
        return Sent(sid=sid)
