from typing import Iterable, List, Optional

from shared.contracts import CategoryRead, InventoryRead, ProductRead
from business_service.application.schemas import CategoryDTO, InventoryDTO, ProductDTO


def to_category_dto(category: Optional[CategoryRead]) -> Optional[CategoryDTO]:
    if category is None:
        return None
    return CategoryDTO(id=category.id, name=category.name, description=category.description)


def to_product_dto(product: Optional[ProductRead]) -> Optional[ProductDTO]:
    if product is None:
        return None
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category=to_category_dto(product.category),
    )


def to_inventory_dto(inventory: Optional[InventoryRead]) -> Optional[InventoryDTO]:
    if inventory is None:
        return None
    return InventoryDTO(
        id=inventory.id,
        product=to_product_dto(inventory.product),
        quantity=inventory.quantity,
        location=inventory.location,
    )


def to_category_dtos(categories: Iterable[CategoryRead]) -> List[CategoryDTO]:
    return [to_category_dto(c) for c in categories]


def to_product_dtos(products: Iterable[ProductRead]) -> List[ProductDTO]:
    return [to_product_dto(p) for p in products]


def to_inventory_dtos(rows: Iterable[InventoryRead]) -> List[InventoryDTO]:
    return [to_inventory_dto(i) for i in rows]
