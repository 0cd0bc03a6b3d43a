"""
Typed HTTP clients for the data service.

Each client wraps one data service resource and returns ``shared.contracts``
models. Failures are translated into the business service's exceptions:

* 404 becomes ``ResourceNotFoundError``
* 400 becomes ``BadRequestError``
* any 5xx, a timeout or a refused connection becomes ``ServiceUnavailableError``
* any other 4xx becomes ``DataServiceError`` carrying the original status

A 2xx answer with an empty body yields ``[]`` for list calls and ``None``
for single-object calls.
"""

from typing import Any, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from shared.contracts import (
    CategoryCreate,
    CategoryRead,
    InventoryCreate,
    InventoryRead,
    ProductCreate,
    ProductRead,
)
from shared.core import get_logger, outgoing_trace_headers
from business_service.application.exceptions import (
    BadRequestError,
    DataServiceError,
    ResourceNotFoundError,
    ServiceUnavailableError,
)

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


def _segment(value: str) -> str:
    """Percent-encode one path segment, including `/`, `?`, `#` and `%`."""
    return quote(value, safe="")


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text or f"Data service returned {response.status_code}"


def decode_error(response: httpx.Response) -> DataServiceError:
    """Map a non-2xx data service response to a business exception."""
    status_code = response.status_code
    message = _error_message(response)
    if status_code == 404:
        return ResourceNotFoundError(message)
    if status_code == 400:
        return BadRequestError(message)
    if status_code >= 500:
        return ServiceUnavailableError(message)
    return DataServiceError(message, status_code)


class DataServiceClient:
    """Base client; ``http`` must already point at the data service."""

    def __init__(self, http: httpx.Client):
        self.http = http

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        headers = {**outgoing_trace_headers(), **kwargs.pop("headers", {})}
        try:
            response = self.http.request(method, path, headers=headers, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Data service unreachable on {method} {path}: {e}")
            raise ServiceUnavailableError(f"Data service is unavailable: {e}") from e
        if response.is_error:
            logger.warning(f"Data service answered {response.status_code} on {method} {path}")
            raise decode_error(response)
        return response

    def _get_one(self, model: Type[ModelType], method: str, path: str, **kwargs: Any) -> Optional[ModelType]:
        response = self._request(method, path, **kwargs)
        if not response.content.strip():
            return None
        return model.model_validate(response.json())

    def _get_list(self, model: Type[ModelType], path: str, **kwargs: Any) -> List[ModelType]:
        response = self._request("GET", path, **kwargs)
        if not response.content.strip():
            return []
        return [model.model_validate(item) for item in response.json()]

    def _delete(self, path: str) -> None:
        self._request("DELETE", path)


class CategoryClient(DataServiceClient):
    base_path = "/data/categories"

    def get_all(self) -> List[CategoryRead]:
        return self._get_list(CategoryRead, f"{self.base_path}/")

    def get_by_id(self, category_id: int) -> Optional[CategoryRead]:
        return self._get_one(CategoryRead, "GET", f"{self.base_path}/{category_id}")

    def get_by_name(self, name: str) -> Optional[CategoryRead]:
        return self._get_one(CategoryRead, "GET", f"{self.base_path}/name/{_segment(name)}")

    def search(self, name: str) -> List[CategoryRead]:
        return self._get_list(CategoryRead, f"{self.base_path}/search", params={"name": name})

    def create(self, payload: CategoryCreate) -> Optional[CategoryRead]:
        return self._get_one(CategoryRead, "POST", f"{self.base_path}/", json=payload.model_dump(mode="json"))

    def update(self, category_id: int, payload: CategoryCreate) -> Optional[CategoryRead]:
        return self._get_one(CategoryRead, "PUT", f"{self.base_path}/{category_id}", json=payload.model_dump(mode="json"))

    def delete(self, category_id: int) -> None:
        self._delete(f"{self.base_path}/{category_id}")


class ProductClient(DataServiceClient):
    base_path = "/data/products"

    def get_all(self) -> List[ProductRead]:
        return self._get_list(ProductRead, f"{self.base_path}/")

    def get_by_id(self, product_id: int) -> Optional[ProductRead]:
        return self._get_one(ProductRead, "GET", f"{self.base_path}/{product_id}")

    def search(self, name: str) -> List[ProductRead]:
        return self._get_list(ProductRead, f"{self.base_path}/search", params={"name": name})

    def get_by_category_id(self, category_id: int) -> List[ProductRead]:
        return self._get_list(ProductRead, f"{self.base_path}/category/{category_id}")

    def get_by_category_name(self, category_name: str) -> List[ProductRead]:
        return self._get_list(ProductRead, f"{self.base_path}/category/name/{_segment(category_name)}")

    def get_by_max_price(self, max_price: float) -> List[ProductRead]:
        return self._get_list(ProductRead, f"{self.base_path}/price/max/{max_price}")

    def get_by_min_price(self, min_price: float) -> List[ProductRead]:
        return self._get_list(ProductRead, f"{self.base_path}/price/min/{min_price}")

    def get_by_price_range(self, min_price: float, max_price: float) -> List[ProductRead]:
        return self._get_list(
            ProductRead,
            f"{self.base_path}/price/range",
            params={"min_price": min_price, "max_price": max_price},
        )

    def create(self, payload: ProductCreate) -> Optional[ProductRead]:
        return self._get_one(ProductRead, "POST", f"{self.base_path}/", json=payload.model_dump(mode="json"))

    def update(self, product_id: int, payload: ProductCreate) -> Optional[ProductRead]:
        return self._get_one(ProductRead, "PUT", f"{self.base_path}/{product_id}", json=payload.model_dump(mode="json"))

    def assign_category(self, product_id: int, category_id: int) -> Optional[ProductRead]:
        return self._get_one(ProductRead, "PUT", f"{self.base_path}/{product_id}/category/{category_id}")

    def remove_category(self, product_id: int) -> Optional[ProductRead]:
        return self._get_one(ProductRead, "DELETE", f"{self.base_path}/{product_id}/category")

    def delete(self, product_id: int) -> None:
        self._delete(f"{self.base_path}/{product_id}")


class InventoryClient(DataServiceClient):
    base_path = "/data/inventory"

    def get_all(self) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/")

    def get_by_id(self, inventory_id: int) -> Optional[InventoryRead]:
        return self._get_one(InventoryRead, "GET", f"{self.base_path}/{inventory_id}")

    def get_by_product_id(self, product_id: int) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/product/{product_id}")

    def get_by_product_name(self, product_name: str) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/product/name/{_segment(product_name)}")

    def get_by_location(self, location: str) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/location/{_segment(location)}")

    def get_quantity_less_than(self, quantity: int) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/quantity/less/{quantity}")

    def get_quantity_greater_than(self, quantity: int) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/quantity/greater/{quantity}")

    def get_quantity_between(self, min_quantity: int, max_quantity: int) -> List[InventoryRead]:
        return self._get_list(
            InventoryRead,
            f"{self.base_path}/quantity/range",
            params={"min_quantity": min_quantity, "max_quantity": max_quantity},
        )

    def get_by_category_id(self, category_id: int) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/category/{category_id}")

    def get_out_of_stock(self) -> List[InventoryRead]:
        return self._get_list(InventoryRead, f"{self.base_path}/out-of-stock")

    def create(self, payload: InventoryCreate) -> Optional[InventoryRead]:
        return self._get_one(InventoryRead, "POST", f"{self.base_path}/", json=payload.model_dump(mode="json"))

    def update(self, inventory_id: int, payload: InventoryCreate) -> Optional[InventoryRead]:
        return self._get_one(InventoryRead, "PUT", f"{self.base_path}/{inventory_id}", json=payload.model_dump(mode="json"))

    def update_quantity(self, inventory_id: int, quantity: int) -> Optional[InventoryRead]:
        return self._get_one(InventoryRead, "PATCH", f"{self.base_path}/{inventory_id}/quantity/{quantity}")

    def delete(self, inventory_id: int) -> None:
        self._delete(f"{self.base_path}/{inventory_id}")
