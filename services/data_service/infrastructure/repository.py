"""
Repositories for the catalog tables.

``Repository`` carries the generic CRUD operations; the per-entity
subclasses only add their finders.

Usage:
    products = ProductRepository(db)
    products.find_by_name_containing("phone")
"""

from typing import Generic, Optional, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from data_service.application.exceptions import DataIntegrityError
from data_service.domain.models import Base, Category, Inventory, Product

ModelType = TypeVar("ModelType", bound=Base)


class Repository(Generic[ModelType]):
    """Generic CRUD repository bound to one model class and one session."""

    model: type[ModelType]

    def __init__(self, db: Session):
        self.db = db

    def _all(self, query: Select) -> Sequence[ModelType]:
        return self.db.scalars(query.order_by(self.model.id)).unique().all()

    def find_all(self) -> Sequence[ModelType]:
        return self._all(select(self.model))

    def find_by_id(self, record_id: int) -> Optional[ModelType]:
        return self.db.get(self.model, record_id)

    def exists_by_id(self, record_id: int) -> bool:
        query = select(func.count()).select_from(self.model).where(self.model.id == record_id)
        return self.db.scalar(query) > 0

    def save(self, obj: ModelType) -> ModelType:
        """Insert or update ``obj`` in its own transaction."""
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DataIntegrityError(
                f"{self.model.__name__} violates a database constraint"
            ) from e
        self.db.refresh(obj)
        return obj

    def delete(self, obj: ModelType) -> None:
        self.db.delete(obj)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DataIntegrityError(
                f"{self.model.__name__} is still referenced and cannot be deleted"
            ) from e


class CategoryRepository(Repository[Category]):
    model = Category

    def find_by_name(self, name: str) -> Optional[Category]:
        query = select(Category).where(func.lower(Category.name) == name.lower())
        return self.db.scalars(query).first()

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def find_by_name_containing(self, name: str) -> Sequence[Category]:
        return self._all(select(Category).where(Category.name.icontains(name, autoescape=True)))


class ProductRepository(Repository[Product]):
    model = Product

    def find_by_name_containing(self, name: str) -> Sequence[Product]:
        return self._all(select(Product).where(Product.name.icontains(name, autoescape=True)))

    def find_by_category_id(self, category_id: int) -> Sequence[Product]:
        return self._all(select(Product).where(Product.category_id == category_id))

    def find_by_category_name(self, category_name: str) -> Sequence[Product]:
        query = (
            select(Product)
            .join(Product.category)
            .where(func.lower(Category.name) == category_name.lower())
        )
        return self._all(query)

    def find_by_price_at_most(self, max_price: float) -> Sequence[Product]:
        return self._all(select(Product).where(Product.price <= max_price))

    def find_by_price_at_least(self, min_price: float) -> Sequence[Product]:
        return self._all(select(Product).where(Product.price >= min_price))

    def find_by_price_between(self, min_price: float, max_price: float) -> Sequence[Product]:
        return self._all(select(Product).where(Product.price.between(min_price, max_price)))


class InventoryRepository(Repository[Inventory]):
    model = Inventory

    def find_by_product_id(self, product_id: int) -> Sequence[Inventory]:
        return self._all(select(Inventory).where(Inventory.product_id == product_id))

    def find_by_location(self, location: str) -> Sequence[Inventory]:
        return self._all(select(Inventory).where(func.lower(Inventory.location) == location.lower()))

    def find_by_quantity_less_than(self, quantity: int) -> Sequence[Inventory]:
        return self._all(select(Inventory).where(Inventory.quantity < quantity))

    def find_by_quantity_greater_than(self, quantity: int) -> Sequence[Inventory]:
        return self._all(select(Inventory).where(Inventory.quantity > quantity))

    def find_by_quantity_between(self, min_quantity: int, max_quantity: int) -> Sequence[Inventory]:
        return self._all(select(Inventory).where(Inventory.quantity.between(min_quantity, max_quantity)))

    def find_by_quantity_equals(self, quantity: int) -> Sequence[Inventory]:
        return self._all(select(Inventory).where(Inventory.quantity == quantity))

    def find_by_product_name_containing(self, product_name: str) -> Sequence[Inventory]:
        query = (
            select(Inventory)
            .join(Product, Inventory.product_id == Product.id)
            .where(Product.name.icontains(product_name, autoescape=True))
        )
        return self._all(query)

    def find_by_product_category_id(self, category_id: int) -> Sequence[Inventory]:
        query = (
            select(Inventory)
            .join(Product, Inventory.product_id == Product.id)
            .where(Product.category_id == category_id)
        )
        return self._all(query)
