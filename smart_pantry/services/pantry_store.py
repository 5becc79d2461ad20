"""Persistence operations for categories and pantry items."""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import Any

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from smart_pantry.ids import new_id
from smart_pantry.models.category import Category, normalize_category_name
from smart_pantry.models.pantry import PantryItem
from smart_pantry.services.bulk_import import ResolvedItem

logger = logging.getLogger(__name__)


class PantryStore:
    """Store for categories and pantry items backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    # --- Categories ---

    def list_categories(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.normalized_name).all()

    def get_category(self, category_id: str) -> Category | None:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def find_category_by_name(self, name: str) -> Category | None:
        """Find a category by case-insensitive exact name."""
        return (
            self.db.query(Category)
            .filter(Category.normalized_name == normalize_category_name(name))
            .first()
        )

    def find_categories_by_names(self, names: Iterable[str]) -> list[Category]:
        """Find every category matching any of the names, case-insensitively, in one query."""
        normalized = {normalize_category_name(name) for name in names}
        if not normalized:
            return []
        return self.db.query(Category).filter(Category.normalized_name.in_(normalized)).all()

    def create_category(self, name: str) -> Category:
        category = Category(
            id=new_id(),
            name=name.strip(),
            normalized_name=normalize_category_name(name),
        )
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def get_or_create_category(self, name: str) -> tuple[Category, bool]:
        """Insert a category, or return the existing one on a name conflict.

        Returns:
            (category, created)
        """
        try:
            return self.create_category(name), True
        except IntegrityError:
            self.db.rollback()

        existing = self.find_category_by_name(name)
        if existing is None:
            # Conflict on something other than the name
            raise RuntimeError(f"Could not create or find category '{name}'")
        logger.info(f"Category '{name}' already exists as '{existing.name}'")
        return existing, False

    # --- Items ---

    def list_items(
        self,
        search: str | None = None,
        category_id: str | None = None,
    ) -> list[PantryItem]:
        query = self.db.query(PantryItem).options(joinedload(PantryItem.category))
        if search:
            query = query.filter(PantryItem.name.ilike(f"%{search.strip()}%"))
        if category_id:
            query = query.filter(PantryItem.category_id == category_id)
        return query.order_by(PantryItem.created_at, PantryItem.id).all()

    def list_expiring_items(self, within_days: int, today: date | None = None) -> list[PantryItem]:
        """Items expiring on or before ``today + within_days``, including expired ones."""
        cutoff = (today or date.today()) + timedelta(days=within_days)
        return (
            self.db.query(PantryItem)
            .options(joinedload(PantryItem.category))
            .filter(
                PantryItem.expiration_date.is_not(None),
                PantryItem.expiration_date <= cutoff,
            )
            .order_by(PantryItem.expiration_date, PantryItem.id)
            .all()
        )

    def get_item(self, item_id: str) -> PantryItem | None:
        return (
            self.db.query(PantryItem)
            .options(joinedload(PantryItem.category))
            .filter(PantryItem.id == item_id)
            .first()
        )

    def create_item(
        self,
        name: str,
        quantity: int,
        category_id: str,
        expiration_date: date | None = None,
    ) -> PantryItem:
        item = PantryItem(
            id=new_id(),
            name=name,
            quantity=quantity,
            category_id=category_id,
            expiration_date=expiration_date,
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update_item(self, item: PantryItem, changes: dict[str, Any]) -> PantryItem:
        for field_name, value in changes.items():
            setattr(item, field_name, value)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_item(self, item: PantryItem) -> None:
        self.db.delete(item)
        self.db.commit()

    def bulk_insert_items(self, items: Sequence[ResolvedItem]) -> None:
        """Insert all items in one statement and one transaction.

        All-or-nothing: on any failure the transaction is rolled back and
        the error re-raised, so no row of the batch is persisted.
        """
        rows = [
            {
                "id": item.id,
                "name": item.name,
                "quantity": item.quantity,
                "category_id": item.category_id,
                "expiration_date": item.expiration_date,
            }
            for item in items
        ]
        try:
            self.db.execute(insert(PantryItem), rows)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
