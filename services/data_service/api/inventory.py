from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from shared.contracts import InventoryCreate, InventoryRead
from data_service.infrastructure.db import get_db
from data_service.application.service import InventoryService

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/", response_model=list[InventoryRead])
def list_inventory(db: Session = Depends(get_db)):
    return InventoryService(db).list()


@router.get("/out-of-stock", response_model=list[InventoryRead])
def get_out_of_stock(db: Session = Depends(get_db)):
    return InventoryService(db).out_of_stock()


@router.get("/product/name/{product_name}", response_model=list[InventoryRead])
def get_inventory_by_product_name(product_name: str, db: Session = Depends(get_db)):
    return InventoryService(db).by_product_name(product_name)


@router.get("/product/{product_id}", response_model=list[InventoryRead])
def get_inventory_by_product(product_id: int, db: Session = Depends(get_db)):
    return InventoryService(db).by_product_id(product_id)


@router.get("/location/{location}", response_model=list[InventoryRead])
def get_inventory_by_location(location: str, db: Session = Depends(get_db)):
    return InventoryService(db).by_location(location)


@router.get("/quantity/less/{quantity}", response_model=list[InventoryRead])
def get_inventory_below(quantity: int, db: Session = Depends(get_db)):
    return InventoryService(db).quantity_less_than(quantity)


@router.get("/quantity/greater/{quantity}", response_model=list[InventoryRead])
def get_inventory_above(quantity: int, db: Session = Depends(get_db)):
    return InventoryService(db).quantity_greater_than(quantity)


@router.get("/quantity/range", response_model=list[InventoryRead])
def get_inventory_in_range(
    min_quantity: int = Query(...),
    max_quantity: int = Query(...),
    db: Session = Depends(get_db),
):
    return InventoryService(db).quantity_between(min_quantity, max_quantity)


@router.get("/category/{category_id}", response_model=list[InventoryRead])
def get_inventory_by_category(category_id: int, db: Session = Depends(get_db)):
    return InventoryService(db).by_product_category(category_id)


@router.get("/{inventory_id}", response_model=InventoryRead)
def get_inventory(inventory_id: int, db: Session = Depends(get_db)):
    return InventoryService(db).get(inventory_id)


@router.post("/", response_model=InventoryRead, status_code=201)
def create_inventory(payload: InventoryCreate, db: Session = Depends(get_db)):
    return InventoryService(db).create(payload)


@router.put("/{inventory_id}", response_model=InventoryRead)
def update_inventory(inventory_id: int, payload: InventoryCreate, db: Session = Depends(get_db)):
    return InventoryService(db).update(inventory_id, payload)


@router.patch("/{inventory_id}/quantity/{quantity}", response_model=InventoryRead)
def update_inventory_quantity(inventory_id: int, quantity: int, db: Session = Depends(get_db)):
    return InventoryService(db).update_quantity(inventory_id, quantity)


@router.delete("/{inventory_id}", status_code=204)
def delete_inventory(inventory_id: int, db: Session = Depends(get_db)):
    InventoryService(db).delete(inventory_id)
    return None
