"""Data access for products."""

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from app.models import Product

UPDATABLE_FIELDS = frozenset({"name", "description", "price", "stock"})


class ProductStore:
    """CRUD over the products table. Every write commits; failures roll back and propagate."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def _commit(self) -> None:
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def create(self, fields: dict[str, Any]) -> Product:
        now = datetime.now(UTC)
        product = Product(
            id=uuid.uuid4(),
            name=fields["name"],
            description=fields["description"],
            price=fields["price"],
            stock=fields["stock"],
            created_at=now,
            updated_at=now,
        )
        self._db.add(product)
        self._commit()
        self._db.refresh(product)
        return product

    def list(self) -> list[Product]:
        return self._db.query(Product).order_by(Product.created_at).all()

    def get(self, product_id: uuid.UUID) -> Product | None:
        return self._db.get(Product, product_id)

    def update(self, product_id: uuid.UUID, changes: dict[str, Any]) -> Product | None:
        """Apply only the supplied (non-None) fields and refresh updated_at. None if missing."""
        product = self.get(product_id)
        if product is None:
            return None
        for field, value in changes.items():
            if field in UPDATABLE_FIELDS and value is not None:
                setattr(product, field, value)
        product.updated_at = datetime.now(UTC)
        self._commit()
        self._db.refresh(product)
        return product

    def delete(self, product_id: uuid.UUID) -> bool:
        """Delete by id; False when no row matched."""
        deleted = (
            self._db.query(Product)
            .filter(Product.id == product_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return deleted > 0
