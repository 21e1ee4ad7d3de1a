import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from backend.database import DataPaths
from backend.store import CatalogStore, OrderStore, StoreUnavailable


def inspect_store(data_dir=None):
    paths = DataPaths(data_dir)
    try:
        products = CatalogStore(paths.products_file).load_all()
        orders = OrderStore(paths.orders_file).load_all()
    except StoreUnavailable as e:
        print(f"Error: {e}")
        return 1

    print(f"--- Catalog ({len(products)} products) ---")
    for p in products:
        print(f" - {p.name}: ₹{p.price} / {p.unit} {p.image or '(no image)'}")

    print(f"\n--- Orders ({len(orders)}) ---")
    for o in orders:
        items = ", ".join(f"{i.name}: {i.qty}" for i in o.items)
        print(f" - [{o.date}] {o.name} ({o.phone}) -> {items} | ₹{o.total} @ {o.location}")

    revenue = sum(o.total for o in orders)
    print(f"\nTotal revenue on record: ₹{revenue}")
    return 0


if __name__ == "__main__":
    sys.exit(inspect_store(sys.argv[1] if len(sys.argv) > 1 else None))
