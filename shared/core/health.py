"""
Health probes for the TMS service.

Exposes liveness, readiness and startup endpoints in the
"Health Check Response Format for HTTP APIs" shape, plus a small JSON
metrics endpoint.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from typing import Callable, Dict, Any
import os
import time
from datetime import datetime
from enum import Enum
import psutil
import logging

logger = logging.getLogger(__name__)


class HealthStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


def _now() -> str:
    return datetime.utcnow().isoformat() + "Z"


class ServiceHealth:
    """
    Builds the health router for a service.

    ``engine_factory`` is called on every check so tests and reconfigured
    deployments are probed against the engine actually in use.
    """

    def __init__(self, service_name: str, engine_factory: Callable[[], Engine], version: str = "1.0.0"):
        self.service_name = service_name
        self.version = version
        self.engine_factory = engine_factory
        self.start_time = time.time()
        self.checks_performed = 0
        self.last_check_time = None

    def create_health_router(self) -> APIRouter:
        router = APIRouter(tags=["health"])

        @router.get("/health", status_code=status.HTTP_200_OK)
        async def health_check() -> Dict[str, Any]:
            """Lightweight liveness check used by load balancers."""
            return {
                "status": HealthStatus.PASS,
                "service": self.service_name,
                "version": self.version,
                "message": "Thoron API is running",
                "releaseId": os.getenv("RELEASE_ID", "unknown"),
                "timestamp": _now()
            }

        @router.get("/health/live", status_code=status.HTTP_200_OK)
        async def liveness() -> Dict[str, Any]:
            return {"status": "alive"}

        @router.get("/health/ready")
        async def readiness() -> JSONResponse:
            """Dependency checks; 503 when any of them fails."""
            checks = self._perform_readiness_checks()
            overall_status = self._calculate_overall_status(checks)
            status_code = status.HTTP_200_OK if overall_status != HealthStatus.FAIL else status.HTTP_503_SERVICE_UNAVAILABLE

            response = {
                "status": overall_status,
                "version": self.version,
                "releaseId": os.getenv("RELEASE_ID", "unknown"),
                "checks": checks,
                "serviceId": self.service_name,
                "description": f"{self.service_name} freight management API",
                "timestamp": _now()
            }
            return JSONResponse(status_code=status_code, content=response)

        @router.get("/health/startup")
        async def startup() -> JSONResponse:
            checks = {"database:migrations": self._check_migrations()}
            if self._calculate_overall_status(checks) == HealthStatus.FAIL:
                return JSONResponse(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    content={"status": "starting", "checks": checks}
                )
            return JSONResponse(content={"status": "started", "checks": checks})

        @router.get("/metrics")
        async def metrics() -> Dict[str, Any]:
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
                    "num_threads": process.num_threads()
                }
            }

        return router

    def _perform_readiness_checks(self) -> Dict[str, Dict[str, Any]]:
        self.checks_performed += 1
        self.last_check_time = time.time()
        return {
            "database:connectivity": self._check_database(),
            "storage:disk_space": self._check_disk_space(),
            "system:memory": self._check_memory(),
        }

    def _check_database(self) -> Dict[str, Any]:
        try:
            start_time = time.time()
            with self.engine_factory().connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            response_time = (time.time() - start_time) * 1000
            return {
                "status": HealthStatus.PASS,
                "componentType": "datastore",
                "observedValue": f"{response_time:.2f}ms",
                "observedUnit": "ms",
                "time": _now()
            }
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "status": HealthStatus.FAIL,
                "componentType": "datastore",
                "output": str(e),
                "time": _now()
            }

    def _check_disk_space(self) -> Dict[str, Any]:
        try:
            free_gb = psutil.disk_usage('/').free / (1024 ** 3)
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
                "time": _now()
            }
        except Exception as e:
            return {
                "status": HealthStatus.WARN,
                "componentType": "system",
                "output": str(e),
                "time": _now()
            }

    def _check_memory(self) -> Dict[str, Any]:
        try:
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
                "time": _now()
            }
        except Exception as e:
            return {
                "status": HealthStatus.WARN,
                "componentType": "system",
                "output": str(e),
                "time": _now()
            }

    def _check_migrations(self) -> Dict[str, Any]:
        """WARN when the schema exists but carries no alembic history."""
        try:
            inspector = inspect(self.engine_factory())
            if inspector.has_table("alembic_version"):
                return {"status": HealthStatus.PASS, "componentType": "datastore", "time": _now()}
            if inspector.has_table("shipments"):
                return {
                    "status": HealthStatus.WARN,
                    "componentType": "datastore",
                    "output": "Schema present without migration history",
                    "time": _now()
                }
            return {
                "status": HealthStatus.FAIL,
                "componentType": "datastore",
                "output": "Schema not initialized",
                "time": _now()
            }
        except Exception as e:
            return {
                "status": HealthStatus.FAIL,
                "componentType": "datastore",
                "output": str(e),
                "time": _now()
            }

    def _calculate_overall_status(self, checks: Dict[str, Dict[str, Any]]) -> HealthStatus:
        statuses = [check.get("status", HealthStatus.PASS) for check in checks.values()]
        if HealthStatus.FAIL in statuses:
            return HealthStatus.FAIL
        if HealthStatus.WARN in statuses:
            return HealthStatus.WARN
        return HealthStatus.PASS
