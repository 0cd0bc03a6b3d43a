import httpx
from fastapi import APIRouter, Depends, Query
from shared.contracts import ProductCreate
from business_service.api.deps import get_http_client
from business_service.application.schemas import ProductDTO, ProductStockResponse
from business_service.application.service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=list[ProductDTO])
def list_products(http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).list()


@router.get("/search", response_model=list[ProductDTO])
def search_products(name: str = Query(...), http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).search(name)


@router.get("/category/name/{category_name}", response_model=list[ProductDTO])
def get_products_by_category_name(category_name: str, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).by_category_name(category_name)


@router.get("/category/{category_id}", response_model=list[ProductDTO])
def get_products_by_category(category_id: int, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).by_category_id(category_id)


@router.get("/price/max/{max_price}", response_model=list[ProductDTO])
def get_products_by_max_price(max_price: float, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).by_max_price(max_price)


@router.get("/price/min/{min_price}", response_model=list[ProductDTO])
def get_products_by_min_price(min_price: float, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).by_min_price(min_price)


@router.get("/price/range", response_model=list[ProductDTO])
def get_products_by_price_range(
    min_price: float = Query(...),
    max_price: float = Query(...),
    http: httpx.Client = Depends(get_http_client),
):
    return ProductService(http).by_price_range(min_price, max_price)


@router.get("/{product_id}/stock", response_model=ProductStockResponse)
def get_product_stock(product_id: int, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).stock(product_id)


@router.get("/{product_id}", response_model=ProductDTO)
def get_product(product_id: int, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).get(product_id)


@router.post("/", response_model=ProductDTO, status_code=201)
def create_product(payload: ProductCreate, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).create(payload)


@router.put("/{product_id}/category/{category_id}", response_model=ProductDTO)
def assign_category(product_id: int, category_id: int, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).assign_category(product_id, category_id)


@router.put("/{product_id}", response_model=ProductDTO)
def update_product(product_id: int, payload: ProductCreate, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).update(product_id, payload)


@router.delete("/{product_id}/category", response_model=ProductDTO)
def remove_category(product_id: int, http: httpx.Client = Depends(get_http_client)):
    return ProductService(http).remove_category(product_id)


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, http: httpx.Client = Depends(get_http_client)):
    ProductService(http).delete(product_id)
    return None
