from datetime import datetime
from typing import List

import httpx

from shared.contracts import CategoryCreate, InventoryCreate, ProductCreate
from shared.core import get_logger
from business_service.application.exceptions import DataServiceError, ResourceNotFoundError
from business_service.application.mappers import (
    to_category_dto,
    to_category_dtos,
    to_inventory_dto,
    to_inventory_dtos,
    to_product_dto,
    to_product_dtos,
)
from business_service.application.schemas import (
    CategoryDTO,
    InventoryDTO,
    ProductDTO,
    ProductStockResponse,
)
from business_service.core_settings import get_settings
from business_service.infrastructure.clients import CategoryClient, InventoryClient, ProductClient

logger = get_logger(__name__)


def _found(result, resource: str, field: str, value):
    if result is None:
        raise ResourceNotFoundError(f"{resource} not found with {field}: {value}")
    return result


def _written(result, action: str, resource: str):
    if result is None:
        raise DataServiceError(f"Data service returned no {resource} after {action}")
    return result


class CategoryService:
    def __init__(self, http: httpx.Client):
        self.client = CategoryClient(http)

    def list(self) -> List[CategoryDTO]:
        return to_category_dtos(self.client.get_all())

    def get(self, category_id: int) -> CategoryDTO:
        return to_category_dto(_found(self.client.get_by_id(category_id), "Category", "id", category_id))

    def get_by_name(self, name: str) -> CategoryDTO:
        return to_category_dto(_found(self.client.get_by_name(name), "Category", "name", name))

    def search(self, name: str) -> List[CategoryDTO]:
        return to_category_dtos(self.client.search(name))

    def create(self, data: CategoryCreate) -> CategoryDTO:
        category = _written(self.client.create(data), "create", "category")
        logger.info(f"Created category {category.id} via data service")
        return to_category_dto(category)

    def update(self, category_id: int, data: CategoryCreate) -> CategoryDTO:
        return to_category_dto(_written(self.client.update(category_id, data), "update", "category"))

    def delete(self, category_id: int) -> None:
        self.client.delete(category_id)
        logger.info(f"Deleted category {category_id} via data service")


class ProductService:
    def __init__(self, http: httpx.Client):
        self.client = ProductClient(http)
        self.inventory = InventoryClient(http)

    def list(self) -> List[ProductDTO]:
        return to_product_dtos(self.client.get_all())

    def get(self, product_id: int) -> ProductDTO:
        return to_product_dto(_found(self.client.get_by_id(product_id), "Product", "id", product_id))

    def search(self, name: str) -> List[ProductDTO]:
        return to_product_dtos(self.client.search(name))

    def by_category_id(self, category_id: int) -> List[ProductDTO]:
        return to_product_dtos(self.client.get_by_category_id(category_id))

    def by_category_name(self, category_name: str) -> List[ProductDTO]:
        return to_product_dtos(self.client.get_by_category_name(category_name))

    def by_max_price(self, max_price: float) -> List[ProductDTO]:
        return to_product_dtos(self.client.get_by_max_price(max_price))

    def by_min_price(self, min_price: float) -> List[ProductDTO]:
        return to_product_dtos(self.client.get_by_min_price(min_price))

    def by_price_range(self, min_price: float, max_price: float) -> List[ProductDTO]:
        return to_product_dtos(self.client.get_by_price_range(min_price, max_price))

    def create(self, data: ProductCreate) -> ProductDTO:
        product = _written(self.client.create(data), "create", "product")
        logger.info(f"Created product {product.id} via data service")
        return to_product_dto(product)

    def update(self, product_id: int, data: ProductCreate) -> ProductDTO:
        return to_product_dto(_written(self.client.update(product_id, data), "update", "product"))

    def assign_category(self, product_id: int, category_id: int) -> ProductDTO:
        return to_product_dto(
            _written(self.client.assign_category(product_id, category_id), "category assignment", "product")
        )

    def remove_category(self, product_id: int) -> ProductDTO:
        return to_product_dto(
            _written(self.client.remove_category(product_id), "category removal", "product")
        )

    def delete(self, product_id: int) -> None:
        self.client.delete(product_id)
        logger.info(f"Deleted product {product_id} via data service")

    def stock(self, product_id: int) -> ProductStockResponse:
        """Combine a product with the inventory held for it across all locations."""
        product = self.get(product_id)
        rows = self.inventory.get_by_product_id(product_id)
        stock_quantity = sum(row.quantity for row in rows)
        locations = sorted({row.location for row in rows})
        return ProductStockResponse(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            stock_quantity=stock_quantity,
            is_low_stock=stock_quantity < get_settings().LOW_STOCK_THRESHOLD,
            location=", ".join(locations) if locations else None,
            last_updated=datetime.now(),
        )


class InventoryService:
    def __init__(self, http: httpx.Client):
        self.client = InventoryClient(http)

    def list(self) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_all())

    def get(self, inventory_id: int) -> InventoryDTO:
        return to_inventory_dto(_found(self.client.get_by_id(inventory_id), "Inventory", "id", inventory_id))

    def by_product_id(self, product_id: int) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_by_product_id(product_id))

    def by_product_name(self, product_name: str) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_by_product_name(product_name))

    def by_location(self, location: str) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_by_location(location))

    def quantity_less_than(self, quantity: int) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_quantity_less_than(quantity))

    def quantity_greater_than(self, quantity: int) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_quantity_greater_than(quantity))

    def quantity_between(self, min_quantity: int, max_quantity: int) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_quantity_between(min_quantity, max_quantity))

    def by_category_id(self, category_id: int) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_by_category_id(category_id))

    def out_of_stock(self) -> List[InventoryDTO]:
        return to_inventory_dtos(self.client.get_out_of_stock())

    def create(self, data: InventoryCreate) -> InventoryDTO:
        inventory = _written(self.client.create(data), "create", "inventory")
        logger.info(f"Created inventory {inventory.id} via data service")
        return to_inventory_dto(inventory)

    def update(self, inventory_id: int, data: InventoryCreate) -> InventoryDTO:
        return to_inventory_dto(_written(self.client.update(inventory_id, data), "update", "inventory"))

    def update_quantity(self, inventory_id: int, quantity: int) -> InventoryDTO:
        return to_inventory_dto(
            _written(self.client.update_quantity(inventory_id, quantity), "quantity update", "inventory")
        )

    def delete(self, inventory_id: int) -> None:
        self.client.delete(inventory_id)
        logger.info(f"Deleted inventory {inventory_id} via data service")
