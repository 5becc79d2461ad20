"""Pantry store tests."""

from datetime import date, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from smart_pantry.models.category import Category
from smart_pantry.models.pantry import PantryItem
from smart_pantry.services.bulk_import import ResolvedItem


def test_find_category_by_name_is_case_insensitive(store, categories):
    assert store.find_category_by_name("dairy").id == categories["Dairy"].id
    assert store.find_category_by_name(" GRAINS ").id == categories["Grains"].id
    assert store.find_category_by_name("Spices") is None


def test_find_categories_by_names(store, categories):
    found = store.find_categories_by_names({"dairy", "Dairy", "grains", "Spices"})
    assert {c.name for c in found} == {"Dairy", "Grains"}
    assert store.find_categories_by_names(set()) == []


def test_create_category_rejects_case_duplicate(store, categories):
    with pytest.raises(IntegrityError):
        store.create_category("DAIRY")


def test_get_or_create_category(store, db):
    created, was_created = store.get_or_create_category("Spices")
    assert was_created

    existing, was_created = store.get_or_create_category("spices")
    assert not was_created
    assert existing.id == created.id
    assert db.query(Category).count() == 1


def test_bulk_insert_items(store, categories, db):
    items = [
        ResolvedItem(
            id=f"01J0000000000000000000000{i}",
            name=f"Item {i}",
            quantity=i,
            category_id=categories["Grains"].id,
            expiration_date=date(2026, 1, i + 1),
        )
        for i in range(3)
    ]
    store.bulk_insert_items(items)

    rows = db.query(PantryItem).order_by(PantryItem.id).all()
    assert [r.name for r in rows] == ["Item 0", "Item 1", "Item 2"]
    assert rows[0].category.name == "Grains"
    assert rows[2].expiration_date == date(2026, 1, 3)


def test_bulk_insert_is_all_or_nothing(store, categories, db):
    """A duplicate id anywhere in the batch keeps every row out."""
    item = ResolvedItem(
        id="01J00000000000000000000000",
        name="Rice",
        quantity=1,
        category_id=categories["Grains"].id,
        expiration_date=None,
    )
    with pytest.raises(IntegrityError):
        store.bulk_insert_items([item, item])

    assert db.query(PantryItem).count() == 0


def test_list_expiring_items_uses_given_day(store, categories):
    today = date(2026, 6, 1)
    for name, offset in (("Past", -1), ("Inside", 2), ("Outside", 3)):
        store.create_item(
            name=name,
            quantity=1,
            category_id=categories["Fruits"].id,
            expiration_date=today + timedelta(days=offset),
        )

    expiring = store.list_expiring_items(2, today=today)
    assert [i.name for i in expiring] == ["Past", "Inside"]
