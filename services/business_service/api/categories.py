import httpx
from fastapi import APIRouter, Depends, Query
from shared.contracts import CategoryCreate
from business_service.api.deps import get_http_client
from business_service.application.schemas import CategoryDTO
from business_service.application.service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=list[CategoryDTO])
def list_categories(http: httpx.Client = Depends(get_http_client)):
    return CategoryService(http).list()


@router.get("/search", response_model=list[CategoryDTO])
def search_categories(name: str = Query(...), http: httpx.Client = Depends(get_http_client)):
    return CategoryService(http).search(name)


@router.get("/name/{name}", response_model=CategoryDTO)
def get_category_by_name(name: str, http: httpx.Client = Depends(get_http_client)):
    return CategoryService(http).get_by_name(name)


@router.get("/{category_id}", response_model=CategoryDTO)
def get_category(category_id: int, http: httpx.Client = Depends(get_http_client)):
    return CategoryService(http).get(category_id)


@router.post("/", response_model=CategoryDTO, status_code=201)
def create_category(payload: CategoryCreate, http: httpx.Client = Depends(get_http_client)):
    return CategoryService(http).create(payload)


@router.put("/{category_id}", response_model=CategoryDTO)
def update_category(category_id: int, payload: CategoryCreate, http: httpx.Client = Depends(get_http_client)):
    return CategoryService(http).update(category_id, payload)


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, http: httpx.Client = Depends(get_http_client)):
    CategoryService(http).delete(category_id)
    return None
