"""
Health and metrics endpoints shared by the catalog services.

Response bodies follow the "Health Check Response Format for HTTP APIs"
draft. Each service registers the dependency checks that matter to it: the
data service checks its database, the business service checks that the data
service answers.
"""

import logging
import os
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

import httpx
import psutil
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

HealthCheck = Callable[[], Dict[str, Any]]


class HealthStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def database_check(engine: Engine) -> HealthCheck:
    """Build a readiness check that runs ``SELECT 1`` against ``engine``."""

    def check() -> Dict[str, Any]:
        start_time = time.perf_counter()
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "status": HealthStatus.FAIL,
                "componentType": "datastore",
                "output": str(e),
                "time": _now(),
            }
        return {
            "status": HealthStatus.PASS,
            "componentType": "datastore",
            "observedValue": f"{(time.perf_counter() - start_time) * 1000:.2f}",
            "observedUnit": "ms",
            "time": _now(),
        }

    return check


def http_dependency_check(url: str, timeout: float = 2.0) -> HealthCheck:
    """Build a readiness check that expects a 2xx answer from ``url``."""

    def check() -> Dict[str, Any]:
        start_time = time.perf_counter()
        try:
            response = httpx.get(url, timeout=timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Dependency health check failed for {url}: {e}")
            return {
                "status": HealthStatus.FAIL,
                "componentType": "component",
                "output": str(e),
                "time": _now(),
            }
        return {
            "status": HealthStatus.PASS,
            "componentType": "component",
            "observedValue": f"{(time.perf_counter() - start_time) * 1000:.2f}",
            "observedUnit": "ms",
            "time": _now(),
        }

    return check


def disk_space_check() -> Dict[str, Any]:
    free_gb = psutil.disk_usage("/").free / (1024 ** 3)
    if free_gb < 1:
        status_val = HealthStatus.FAIL
    elif free_gb < 5:
        status_val = HealthStatus.WARN
    else:
        status_val = HealthStatus.PASS
    return {
        "status": status_val,
        "componentType": "system",
        "observedValue": f"{free_gb:.2f}",
        "observedUnit": "GB",
        "time": _now(),
    }


def memory_check() -> Dict[str, Any]:
    available_mb = psutil.virtual_memory().available / (1024 ** 2)
    if available_mb < 100:
        status_val = HealthStatus.FAIL
    elif available_mb < 500:
        status_val = HealthStatus.WARN
    else:
        status_val = HealthStatus.PASS
    return {
        "status": status_val,
        "componentType": "system",
        "observedValue": f"{available_mb:.2f}",
        "observedUnit": "MB",
        "time": _now(),
    }


class ServiceHealth:
    """
    Health endpoints for one service.

    ``checks`` maps a check name (``"database:connectivity"``) to a callable
    returning a check result. Readiness fails when any check fails; a warning
    keeps the service ready.
    """

    def __init__(
        self,
        service_name: str,
        version: str = "1.0.0",
        checks: Optional[Dict[str, HealthCheck]] = None,
        system_checks: bool = True,
    ):
        self.service_name = service_name
        self.version = version
        self.start_time = time.time()
        self.checks_performed = 0
        self.checks: Dict[str, HealthCheck] = dict(checks or {})
        if system_checks:
            self.checks.setdefault("storage:disk_space", disk_space_check)
            self.checks.setdefault("system:memory", memory_check)

    def run_checks(self) -> Dict[str, Dict[str, Any]]:
        self.checks_performed += 1
        return {name: check() for name, check in self.checks.items()}

    @staticmethod
    def overall_status(checks: Dict[str, Dict[str, Any]]) -> HealthStatus:
        statuses = [check.get("status", HealthStatus.PASS) for check in checks.values()]
        if HealthStatus.FAIL in statuses:
            return HealthStatus.FAIL
        if HealthStatus.WARN in statuses:
            return HealthStatus.WARN
        return HealthStatus.PASS

    def create_health_router(self) -> APIRouter:
        router = APIRouter(tags=["health"])

        @router.get("/health")
        def health_check() -> Dict[str, Any]:
            """Lightweight liveness summary used by load balancers."""
            return {
                "status": HealthStatus.PASS,
                "service": self.service_name,
                "version": self.version,
                "releaseId": os.getenv("RELEASE_ID", "unknown"),
                "timestamp": _now(),
            }

        @router.get("/health/live")
        def liveness() -> Dict[str, Any]:
            return {"status": "alive"}

        @router.get("/health/ready")
        def readiness() -> JSONResponse:
            checks = self.run_checks()
            overall = self.overall_status(checks)
            status_code = (
                status.HTTP_503_SERVICE_UNAVAILABLE
                if overall == HealthStatus.FAIL
                else status.HTTP_200_OK
            )
            return JSONResponse(
                status_code=status_code,
                content={
                    "status": overall.value,
                    "version": self.version,
                    "releaseId": os.getenv("RELEASE_ID", "unknown"),
                    "serviceId": self.service_name,
                    "description": f"{self.service_name} microservice",
                    "checks": {
                        name: {**result, "status": HealthStatus(result["status"]).value}
                        for name, result in checks.items()
                    },
                    "timestamp": _now(),
                },
            )

        @router.get("/health/startup")
        def startup() -> JSONResponse:
            checks = self.run_checks()
            if self.overall_status(checks) == HealthStatus.FAIL:
                return JSONResponse(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    content={"status": "starting"},
                )
            return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "started"})

        @router.get("/metrics")
        def metrics() -> Dict[str, Any]:
            process = psutil.Process()
            memory = process.memory_info()
            return {
                "service": self.service_name,
                "version": self.version,
                "uptime_seconds": time.time() - self.start_time,
                "checks_performed": self.checks_performed,
                "timestamp": _now(),
                "system": {
                    "memory_rss_bytes": memory.rss,
                    "memory_vms_bytes": memory.vms,
                    "cpu_percent": process.cpu_percent(),
                    "num_threads": process.num_threads(),
                },
            }

        return router
