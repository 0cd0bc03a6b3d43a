"""Load a small sample catalog into the data service database."""

from shared.contracts import CategoryCreate, InventoryCreate, ProductCreate
from shared.core import get_logger, setup_logging
from data_service.application.service import CategoryService, InventoryService, ProductService
from data_service.infrastructure.db import SessionLocal, init_models

logger = get_logger(__name__)

# category -> [(name, description, price, [(location, quantity), ...]), ...]
SAMPLE_CATALOG = {
    ("Electronics", "Devices and accessories"): [
        ("Laptop", "14 inch ultrabook", 1299.99, [("Warehouse A", 25), ("Warehouse B", 5)]),
        ("Headphones", "Noise cancelling over-ear", 199.50, [("Warehouse A", 60)]),
        ("USB-C Cable", "1m braided cable", 12.99, [("Warehouse B", 0)]),
    ],
    ("Books", "Printed and bound"): [
        ("Python Cookbook", "Recipes for Python 3", 49.90, [("Warehouse C", 14)]),
        ("Domain-Driven Design", "Tackling complexity", 59.00, [("Warehouse C", 3)]),
    ],
    ("Home", "Kitchen and living"): [
        ("Coffee Grinder", "Burr grinder", 89.00, [("Warehouse A", 8), ("Warehouse C", 12)]),
    ],
}


def seed(db) -> int:
    """Insert the sample catalog; categories that already exist are skipped."""
    categories = CategoryService(db)
    products = ProductService(db)
    inventory = InventoryService(db)
    created = 0
    for (category_name, category_description), items in SAMPLE_CATALOG.items():
        if categories.repository.exists_by_name(category_name):
            logger.info(f"Category '{category_name}' already present, skipping")
            continue
        category = categories.create(CategoryCreate(name=category_name, description=category_description))
        for name, description, price, stock in items:
            product = products.create(
                ProductCreate(name=name, description=description, price=price, category_id=category.id)
            )
            for location, quantity in stock:
                inventory.create(InventoryCreate(product_id=product.id, quantity=quantity, location=location))
        created += 1
    return created


def main():
    setup_logging(service_name="data-seed")
    init_models()
    db = SessionLocal()
    try:
        created = seed(db)
    finally:
        db.close()
    logger.info(f"Seeded {created} categories")


if __name__ == "__main__":
    main()
