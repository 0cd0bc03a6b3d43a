from typing import Optional, Sequence

from sqlalchemy.orm import Session

from shared.contracts import CategoryCreate, InventoryCreate, ProductCreate
from shared.core import get_logger
from data_service.application.exceptions import (
    DuplicateResourceError,
    ResourceNotFoundError,
    ValidationError,
)
from data_service.domain.models import Category, Inventory, Product
from data_service.infrastructure.repository import (
    CategoryRepository,
    InventoryRepository,
    ProductRepository,
)

logger = get_logger(__name__)


def _check_range(low_field: str, low, high_field: str, high) -> None:
    if low > high:
        raise ValidationError("Invalid range").add_error(
            low_field, f"{low_field} must not be greater than {high_field}"
        )


class CategoryService:
    def __init__(self, db: Session):
        self.repository = CategoryRepository(db)

    def list(self) -> Sequence[Category]:
        return self.repository.find_all()

    def get(self, category_id: int) -> Category:
        category = self.repository.find_by_id(category_id)
        if category is None:
            raise ResourceNotFoundError("Category", "id", category_id)
        return category

    def get_by_name(self, name: str) -> Category:
        category = self.repository.find_by_name(name)
        if category is None:
            raise ResourceNotFoundError("Category", "name", name)
        return category

    def search(self, name: str) -> Sequence[Category]:
        return self.repository.find_by_name_containing(name)

    def exists(self, category_id: int) -> bool:
        return self.repository.exists_by_id(category_id)

    def create(self, data: CategoryCreate) -> Category:
        if self.repository.exists_by_name(data.name):
            raise DuplicateResourceError("Category", "name", data.name)
        category = self.repository.save(Category(**data.model_dump()))
        logger.info(f"Created category {category.id} ({category.name})")
        return category

    def update(self, category_id: int, data: CategoryCreate) -> Category:
        category = self.get(category_id)
        # Renaming onto another category's name is a conflict; re-casing its own name is not
        if category.name.lower() != data.name.lower() and self.repository.exists_by_name(data.name):
            raise DuplicateResourceError("Category", "name", data.name)
        category.name = data.name
        category.description = data.description
        return self.repository.save(category)

    def delete(self, category_id: int) -> None:
        category = self.get(category_id)
        self.repository.delete(category)
        logger.info(f"Deleted category {category_id}")


class ProductService:
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
        self.categories = CategoryService(db)

    def list(self) -> Sequence[Product]:
        return self.repository.find_all()

    def get(self, product_id: int) -> Product:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", "id", product_id)
        return product

    def exists(self, product_id: int) -> bool:
        return self.repository.exists_by_id(product_id)

    def search(self, name: str) -> Sequence[Product]:
        return self.repository.find_by_name_containing(name)

    def by_category_id(self, category_id: int) -> Sequence[Product]:
        if not self.categories.exists(category_id):
            raise ResourceNotFoundError("Category", "id", category_id)
        return self.repository.find_by_category_id(category_id)

    def by_category_name(self, category_name: str) -> Sequence[Product]:
        return self.repository.find_by_category_name(category_name)

    def by_max_price(self, max_price: float) -> Sequence[Product]:
        return self.repository.find_by_price_at_most(max_price)

    def by_min_price(self, min_price: float) -> Sequence[Product]:
        return self.repository.find_by_price_at_least(min_price)

    def by_price_range(self, min_price: float, max_price: float) -> Sequence[Product]:
        _check_range("min_price", min_price, "max_price", max_price)
        return self.repository.find_by_price_between(min_price, max_price)

    def _resolve_category(self, category_id: Optional[int]) -> Optional[Category]:
        return self.categories.get(category_id) if category_id is not None else None

    def create(self, data: ProductCreate) -> Product:
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            category=self._resolve_category(data.category_id),
        )
        product = self.repository.save(product)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update(self, product_id: int, data: ProductCreate) -> Product:
        """Replace all fields; a missing ``category_id`` detaches the category."""
        product = self.get(product_id)
        product.name = data.name
        product.description = data.description
        product.price = data.price
        product.category = self._resolve_category(data.category_id)
        return self.repository.save(product)

    def assign_category(self, product_id: int, category_id: int) -> Product:
        product = self.get(product_id)
        product.category = self.categories.get(category_id)
        return self.repository.save(product)

    def remove_category(self, product_id: int) -> Product:
        product = self.get(product_id)
        product.category = None
        return self.repository.save(product)

    def delete(self, product_id: int) -> None:
        product = self.get(product_id)
        self.repository.delete(product)
        logger.info(f"Deleted product {product_id} and its inventory")


class InventoryService:
    def __init__(self, db: Session):
        self.repository = InventoryRepository(db)
        self.products = ProductService(db)

    def list(self) -> Sequence[Inventory]:
        return self.repository.find_all()

    def get(self, inventory_id: int) -> Inventory:
        inventory = self.repository.find_by_id(inventory_id)
        if inventory is None:
            raise ResourceNotFoundError("Inventory", "id", inventory_id)
        return inventory

    def by_product_id(self, product_id: int) -> Sequence[Inventory]:
        if not self.products.exists(product_id):
            raise ResourceNotFoundError("Product", "id", product_id)
        return self.repository.find_by_product_id(product_id)

    def by_location(self, location: str) -> Sequence[Inventory]:
        return self.repository.find_by_location(location)

    def quantity_less_than(self, quantity: int) -> Sequence[Inventory]:
        return self.repository.find_by_quantity_less_than(quantity)

    def quantity_greater_than(self, quantity: int) -> Sequence[Inventory]:
        return self.repository.find_by_quantity_greater_than(quantity)

    def quantity_between(self, min_quantity: int, max_quantity: int) -> Sequence[Inventory]:
        _check_range("min_quantity", min_quantity, "max_quantity", max_quantity)
        return self.repository.find_by_quantity_between(min_quantity, max_quantity)

    def by_product_name(self, product_name: str) -> Sequence[Inventory]:
        return self.repository.find_by_product_name_containing(product_name)

    def by_product_category(self, category_id: int) -> Sequence[Inventory]:
        return self.repository.find_by_product_category_id(category_id)

    def out_of_stock(self) -> Sequence[Inventory]:
        return self.repository.find_by_quantity_equals(0)

    def create(self, data: InventoryCreate) -> Inventory:
        inventory = Inventory(
            product=self.products.get(data.product_id),
            quantity=data.quantity,
            location=data.location,
        )
        inventory = self.repository.save(inventory)
        logger.info(f"Created inventory {inventory.id} for product {inventory.product_id}")
        return inventory

    def update(self, inventory_id: int, data: InventoryCreate) -> Inventory:
        inventory = self.get(inventory_id)
        if inventory.product_id != data.product_id:
            inventory.product = self.products.get(data.product_id)
        inventory.quantity = data.quantity
        inventory.location = data.location
        return self.repository.save(inventory)

    def update_quantity(self, inventory_id: int, quantity: int) -> Inventory:
        inventory = self.get(inventory_id)
        if quantity < 0:
            raise ValidationError("Invalid quantity").add_error(
                "quantity", "Quantity cannot be negative"
            )
        inventory.quantity = quantity
        return self.repository.save(inventory)

    def delete(self, inventory_id: int) -> None:
        inventory = self.get(inventory_id)
        self.repository.delete(inventory)
        logger.info(f"Deleted inventory {inventory_id}")
