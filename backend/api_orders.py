from typing import List

from fastapi import APIRouter, Depends

from .database import get_catalog_store, get_notifier, get_order_store
from .intake import place_order
from .models import Order, OrderRequest
from .notifier import SmsNotifier
from .store import CatalogStore, OrderStore

router = APIRouter(prefix="/api", tags=["orders"])


# Admin order list
@router.get("/orders", response_model=List[Order])
def list_orders(store: OrderStore = Depends(get_order_store)):
    return store.load_all()


# Customer places order
@router.post("/order")
def create_order(
    req: OrderRequest,
    catalog_store: CatalogStore = Depends(get_catalog_store),
    order_store: OrderStore = Depends(get_order_store),
    notifier: SmsNotifier = Depends(get_notifier),
):
    result = place_order(req, catalog_store, order_store, notifier)
    if result.notified:
        message = "✅ Order placed successfully! SMS sent to admin."
    else:
        message = "✅ Order placed but SMS failed."
    return {"message": message, "notified": result.notified, "total": result.order.total}
