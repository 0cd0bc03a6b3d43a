from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from shared.contracts import CategoryCreate, CategoryRead
from data_service.infrastructure.db import get_db
from data_service.application.service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=list[CategoryRead])
def list_categories(db: Session = Depends(get_db)):
    return CategoryService(db).list()


@router.get("/search", response_model=list[CategoryRead])
def search_categories(name: str = Query(..., description="Case-insensitive name fragment"), db: Session = Depends(get_db)):
    return CategoryService(db).search(name)


@router.get("/name/{name}", response_model=CategoryRead)
def get_category_by_name(name: str, db: Session = Depends(get_db)):
    return CategoryService(db).get_by_name(name)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return CategoryService(db).get(category_id)


@router.post("/", response_model=CategoryRead, status_code=201)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    return CategoryService(db).create(payload)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(category_id: int, payload: CategoryCreate, db: Session = Depends(get_db)):
    return CategoryService(db).update(category_id, payload)


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    CategoryService(db).delete(category_id)
    return None
