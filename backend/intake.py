"""
Order intake: load catalog -> price -> persist -> notify admin.

Once the order is on disk it counts as placed, whatever happens to the SMS.
If the catalog can't be read or the order can't be appended, nothing is
persisted and the caller gets IntakeFailed.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .models import Order, OrderRequest
from .notifier import DeliveryFailed, SmsNotifier
from .pricing import compute_total
from .store import CatalogStore, OrderStore, StoreUnavailable

logger = logging.getLogger(__name__)


class IntakeFailed(Exception):
    def __init__(self, stage, reason):
        self.stage = stage  # "catalog" | "persist"
        self.reason = reason
        super().__init__(f"{stage}: {reason}")


@dataclass
class IntakeResult:
    order: Order
    notified: bool
    delivery_error: Optional[str] = None


def format_timestamp(when: datetime) -> str:
    # e.g. "10/18/2026, 2:05:09 PM"
    hour = when.hour % 12 or 12
    return f"{when.month}/{when.day}/{when.year}, {hour}:{when:%M:%S %p}"


def place_order(
    request: OrderRequest,
    catalog_store: CatalogStore,
    order_store: OrderStore,
    notifier: SmsNotifier,
    now=datetime.now,
) -> IntakeResult:
    try:
        catalog = catalog_store.load_all()
    except StoreUnavailable as e:
        logger.error(f"Order from {request.name} rejected, catalog unavailable: {e}")
        raise IntakeFailed("catalog", e.reason) from e

    # Unknown items stay in the order but are priced at zero
    total = compute_total(request.items, catalog)

    order = Order(
        name=request.name,
        phone=request.phone,
        items=request.items,
        total=total,
        location=f"{request.latitude}, {request.longitude}",
        date=format_timestamp(now()),
    )

    try:
        order_store.append(order)
    except StoreUnavailable as e:
        logger.error(f"Order from {request.name} not saved: {e}")
        raise IntakeFailed("persist", e.reason) from e
    logger.info(f"Order placed by {order.name} ({len(order.items)} item(s), total {order.total})")

    result = notifier.notify(order)
    if isinstance(result, DeliveryFailed):
        logger.warning(f"Order from {order.name} placed but SMS failed: {result.error}")
        return IntakeResult(order=order, notified=False, delivery_error=result.error)
    return IntakeResult(order=order, notified=True)
