from typing import Sequence

from .models import OrderItem, Product


def compute_total(items: Sequence[OrderItem], catalog: Sequence[Product]) -> float:
    """
    Sum price * qty for every item whose name exactly matches a catalog product.

    The first product with a matching name wins. Unknown items add nothing and
    are not an error. Plain float arithmetic, no currency rounding.
    """
    prices = {}
    for product in catalog:
        prices.setdefault(product.name, product.price)

    total = 0
    for item in items:
        price = prices.get(item.name)
        if price is not None:
            total += price * item.qty
    return total
