from fastapi import APIRouter

from .categories import router as categories_router
from .inventory import router as inventory_router
from .products import router as products_router

router = APIRouter(prefix="/api")
router.include_router(categories_router)
router.include_router(products_router)
router.include_router(inventory_router)
