"""Liveness, readiness and schema placeholder endpoints."""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse
from config_service import __version__
from config_service.core.database import check_db

router = APIRouter()


@router.get("/status/", response_class=PlainTextResponse)
def ping():
    """Liveness probe."""
    return "pong"


@router.get("/health")
def health_check():
    """Readiness probe with a database connectivity check."""
    database_ok = check_db()
    health_status = {
        "status": "healthy" if database_ok else "degraded",
        "service": "Config Service",
        "version": __version__,
        "checks": {
            "database": {
                "status": "healthy" if database_ok else "unhealthy",
                "message": "Database connection successful" if database_ok else "Database connection failed"
            }
        }
    }
    status_code = status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=health_status, status_code=status_code)


@router.get("/api-docs")
def api_docs():
    return {"message": "OpenAPI/Swagger schema documentation placeholder"}
