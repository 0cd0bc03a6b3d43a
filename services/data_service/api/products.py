from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from shared.contracts import ProductCreate, ProductRead
from data_service.infrastructure.db import get_db
from data_service.application.service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=list[ProductRead])
def list_products(db: Session = Depends(get_db)):
    return ProductService(db).list()


@router.get("/search", response_model=list[ProductRead])
def search_products(name: str = Query(..., description="Case-insensitive name fragment"), db: Session = Depends(get_db)):
    return ProductService(db).search(name)


@router.get("/category/name/{category_name}", response_model=list[ProductRead])
def get_products_by_category_name(category_name: str, db: Session = Depends(get_db)):
    return ProductService(db).by_category_name(category_name)


@router.get("/category/{category_id}", response_model=list[ProductRead])
def get_products_by_category(category_id: int, db: Session = Depends(get_db)):
    return ProductService(db).by_category_id(category_id)


@router.get("/price/max/{max_price}", response_model=list[ProductRead])
def get_products_by_max_price(max_price: float, db: Session = Depends(get_db)):
    return ProductService(db).by_max_price(max_price)


@router.get("/price/min/{min_price}", response_model=list[ProductRead])
def get_products_by_min_price(min_price: float, db: Session = Depends(get_db)):
    return ProductService(db).by_min_price(min_price)


@router.get("/price/range", response_model=list[ProductRead])
def get_products_by_price_range(
    min_price: float = Query(...),
    max_price: float = Query(...),
    db: Session = Depends(get_db),
):
    return ProductService(db).by_price_range(min_price, max_price)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return ProductService(db).get(product_id)


@router.post("/", response_model=ProductRead, status_code=201)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return ProductService(db).create(payload)


@router.put("/{product_id}/category/{category_id}", response_model=ProductRead)
def assign_category(product_id: int, category_id: int, db: Session = Depends(get_db)):
    return ProductService(db).assign_category(product_id, category_id)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: int, payload: ProductCreate, db: Session = Depends(get_db)):
    return ProductService(db).update(product_id, payload)


@router.delete("/{product_id}/category", response_model=ProductRead)
def remove_category(product_id: int, db: Session = Depends(get_db)):
    return ProductService(db).remove_category(product_id)


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    ProductService(db).delete(product_id)
    return None
