from data_service.infrastructure.db import SessionLocal
from data_service.seed import SAMPLE_CATALOG, seed


def test_seed_is_idempotent(data_client):
    db = SessionLocal()
    try:
        assert seed(db) == len(SAMPLE_CATALOG)
        assert seed(db) == 0
    finally:
        db.close()

    categories = data_client.get("/data/categories/").json()
    assert len(categories) == len(SAMPLE_CATALOG)
    assert data_client.get("/data/inventory/out-of-stock").json()[0]["product"]["name"] == "USB-C Cable"


def test_health_and_info(data_client):
    assert data_client.get("/health").json()["service"] == "data-service"
    ready = data_client.get("/health/ready").json()
    assert ready["checks"]["database:connectivity"]["status"] == "pass"
    assert data_client.get("/info").json()["endpoints"]["categories"] == "/data/categories"
