# Starter catalog written on first run, before any read is served.

SEED_PRODUCTS = [
    {"name": "Fresh Cow Milk", "price": 80, "unit": "1L", "image": ""},
    {"name": "Fresh Curd", "price": 50, "unit": "1kg", "image": ""},
    {"name": "Soft Milk 500ml", "price": 40, "unit": "500ml", "image": ""},
]
