import pytest

from backend.models import OrderItem, Product
from backend.pricing import compute_total


def product(name, price, unit="1L"):
    return Product(name=name, price=price, unit=unit, image="")


def item(name, qty):
    return OrderItem(name=name, qty=qty)


CATALOG = [
    product("Fresh Cow Milk", 80),
    product("Fresh Curd", 50, "1kg"),
    product("Soft Milk 500ml", 40, "500ml"),
]


def test_single_matching_item():
    assert compute_total([item("Fresh Cow Milk", 2)], [product("Fresh Cow Milk", 80)]) == 160


def test_unknown_item_contributes_nothing():
    assert compute_total([item("Unknown Item", 3)], [product("Fresh Curd", 50)]) == 0


def test_unknown_items_never_raise_the_total():
    known = [item("Fresh Curd", 1), item("Soft Milk 500ml", 2)]
    assert compute_total(known + [item("Ghee", 5)], CATALOG) == compute_total(known, CATALOG) == 130


def test_total_ignores_item_order():
    items = [item("Fresh Cow Milk", 1), item("Fresh Curd", 3), item("Soft Milk 500ml", 2)]
    assert compute_total(items, CATALOG) == compute_total(list(reversed(items)), CATALOG) == 310


def test_name_match_is_exact_and_case_sensitive():
    assert compute_total([item("fresh cow milk", 1), item("Fresh Cow Milk ", 1)], CATALOG) == 0


def test_first_catalog_entry_wins_on_duplicate_names():
    catalog = [product("Paneer", 90), product("Paneer", 120)]
    assert compute_total([item("Paneer", 2)], catalog) == 180


def test_repeated_items_are_each_counted():
    assert compute_total([item("Fresh Curd", 1), item("Fresh Curd", 2)], CATALOG) == 150


def test_empty_catalog_gives_zero():
    assert compute_total([item("Fresh Curd", 4)], []) == 0


def test_fractional_prices_use_plain_float_arithmetic():
    total = compute_total([item("Butter", 3)], [product("Butter", 0.1)])
    assert total == pytest.approx(0.3)
