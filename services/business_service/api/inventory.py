import httpx
from fastapi import APIRouter, Depends, Query
from shared.contracts import InventoryCreate
from business_service.api.deps import get_http_client
from business_service.application.schemas import InventoryDTO
from business_service.application.service import InventoryService

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/", response_model=list[InventoryDTO])
def list_inventory(http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).list()


@router.get("/out-of-stock", response_model=list[InventoryDTO])
def get_out_of_stock(http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).out_of_stock()


@router.get("/product/name/{product_name}", response_model=list[InventoryDTO])
def get_inventory_by_product_name(product_name: str, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).by_product_name(product_name)


@router.get("/product/{product_id}", response_model=list[InventoryDTO])
def get_inventory_by_product(product_id: int, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).by_product_id(product_id)


@router.get("/location/{location}", response_model=list[InventoryDTO])
def get_inventory_by_location(location: str, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).by_location(location)


@router.get("/quantity/less/{quantity}", response_model=list[InventoryDTO])
def get_inventory_below(quantity: int, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).quantity_less_than(quantity)


@router.get("/quantity/greater/{quantity}", response_model=list[InventoryDTO])
def get_inventory_above(quantity: int, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).quantity_greater_than(quantity)


@router.get("/quantity/range", response_model=list[InventoryDTO])
def get_inventory_in_range(
    min_quantity: int = Query(...),
    max_quantity: int = Query(...),
    http: httpx.Client = Depends(get_http_client),
):
    return InventoryService(http).quantity_between(min_quantity, max_quantity)


@router.get("/category/{category_id}", response_model=list[InventoryDTO])
def get_inventory_by_category(category_id: int, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).by_category_id(category_id)


@router.get("/{inventory_id}", response_model=InventoryDTO)
def get_inventory(inventory_id: int, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).get(inventory_id)


@router.post("/", response_model=InventoryDTO, status_code=201)
def create_inventory(payload: InventoryCreate, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).create(payload)


@router.put("/{inventory_id}", response_model=InventoryDTO)
def update_inventory(inventory_id: int, payload: InventoryCreate, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).update(inventory_id, payload)


@router.patch("/{inventory_id}/quantity/{quantity}", response_model=InventoryDTO)
def update_inventory_quantity(inventory_id: int, quantity: int, http: httpx.Client = Depends(get_http_client)):
    return InventoryService(http).update_quantity(inventory_id, quantity)


@router.delete("/{inventory_id}", status_code=204)
def delete_inventory(inventory_id: int, http: httpx.Client = Depends(get_http_client)):
    InventoryService(http).delete(inventory_id)
    return None
