import json
import logging
from decimal import Decimal

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import ValidationError

from shared.contracts import CategoryCreate, InventoryCreate, ProductCreate
from shared.core import HealthStatus, ServiceHealth, error_body, install_error_handlers
from shared.core.logging_config import RedactionFilter, StructuredFormatter, set_request_context


class TeapotError(Exception):
    status_code = 418

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def build_app():
    app = FastAPI()
    install_error_handlers(app, TeapotError)

    @app.get("/teapot")
    def teapot():
        raise TeapotError("short and stout")

    @app.get("/items/{item_id}")
    def item(item_id: int):
        return {"id": item_id}

    @app.get("/kettles/{name}")
    def kettle(name: str):
        raise TeapotError(f"no kettle named {name}")

    return app


def test_error_body_fields():
    body = error_body(404, "gone", "/things/1")
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert body["message"] == "gone"
    assert body["path"] == "/things/1"
    assert "errors" not in body


def test_service_error_uses_its_status():
    resp = TestClient(build_app()).get("/teapot")
    assert resp.status_code == 418
    assert resp.json()["message"] == "short and stout"


def test_validation_is_400_with_field_errors():
    resp = TestClient(build_app()).get("/items/nope")
    assert resp.status_code == 400
    assert set(resp.json()["errors"]) == {"item_id"}


def test_unknown_route_uses_error_body():
    resp = TestClient(build_app()).get("/missing")
    assert resp.status_code == 404
    assert resp.json()["path"] == "/missing"


def test_error_path_keeps_decoded_reserved_characters():
    resp = TestClient(build_app()).get("/kettles/Bay%203%3F%23")
    assert resp.status_code == 418
    assert resp.json()["message"] == "no kettle named Bay 3?#"
    assert resp.json()["path"] == "/kettles/Bay 3?#"


def test_contracts_strip_and_require_text():
    assert CategoryCreate(name="  Books ").name == "Books"
    with pytest.raises(ValidationError):
        ProductCreate(name="", price=1)
    with pytest.raises(ValidationError):
        InventoryCreate(product_id=1, quantity=1, location="  ")


def test_readiness_fails_when_a_check_fails():
    health = ServiceHealth(
        "test-service",
        checks={"database:connectivity": lambda: {"status": HealthStatus.FAIL, "output": "down"}},
        system_checks=False,
    )
    app = FastAPI()
    app.include_router(health.create_health_router())
    client = TestClient(app)

    assert client.get("/health/live").json() == {"status": "alive"}
    resp = client.get("/health/ready")
    assert resp.status_code == 503
    assert resp.json()["checks"]["database:connectivity"]["status"] == "fail"


def test_readiness_passes_with_warnings():
    checks = {"a": {"status": HealthStatus.PASS}, "b": {"status": HealthStatus.WARN}}
    assert ServiceHealth.overall_status(checks) == HealthStatus.WARN


def test_redaction_masks_values():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "login password=hunter2 ok", None, None)
    RedactionFilter().filter(record)
    assert record.getMessage() == "login password=***REDACTED*** ok"


def test_formatter_emits_json_with_trace():
    set_request_context(request_id="abc-123")
    record = logging.LogRecord("catalog", logging.WARNING, __file__, 7, "hello", None, None)
    payload = json.loads(StructuredFormatter().format(record))
    assert payload["message"] == "hello"
    assert payload["level"] == "WARNING"
    assert payload["trace"]["request_id"] == "abc-123"


@pytest.mark.parametrize("price", [0.001, 100000000])
def test_product_price_fits_two_decimal_column(price):
    with pytest.raises(ValidationError):
        ProductCreate(name="Odd", price=price)


def test_product_price_is_exact_decimal():
    assert ProductCreate(name="Pen", price=19.99).price == Decimal("19.99")
    assert ProductCreate(name="Pen", price="99999999.99").model_dump(mode="json")["price"] == "99999999.99"
