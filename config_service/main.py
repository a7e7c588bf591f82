"""FastAPI application entry point."""
from http import HTTPStatus
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
from config_service import __version__
from config_service.core.config import CORS_ORIGINS, HOST, PORT
from config_service.core.database import init_db, dispose_db
from config_service.core.exceptions import ConfigServiceError, ResourceValidationError
from config_service.core.logging_config import logger
from config_service.api.v1.router import api_router

# Initialize logging
logger.info("Starting Config Service")

# Initialize FastAPI app
app = FastAPI(
    title="Config Service",
    description="Environments and their configuration variables, with a flattened JSON dump per environment",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
logger.info("API routes registered successfully")


@app.on_event("startup")
def startup_event():
    """Connect to the store and create the schema; failure aborts startup."""
    init_db()
    logger.info("Application startup complete")


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown."""
    dispose_db()
    logger.info("Application shutting down")


@app.exception_handler(ConfigServiceError)
async def config_service_error_handler(request: Request, exc: ConfigServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def describe_validation_error(exc: RequestValidationError) -> str:
    """First failing field as "<field>: <reason>"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    loc = [part for part in first.get("loc", ()) if part not in ("body", "query", "path") and not isinstance(part, int)]
    field = ".".join(str(part) for part in loc)
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_error(exc)
    logger.warning(f"Invalid request to {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=ResourceValidationError.status_code,
        content={"error": ResourceValidationError.error, "message": message}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown routes and methods get the same {error, message} body."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        message = f"Cannot {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": HTTPStatus(exc.status_code).phrase, "message": message},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred on the server side."
        }
    )


def run():
    """Console entry point: serve the app with uvicorn."""
    logger.info(f"Config Service API listening on http://{HOST}:{PORT}")
    uvicorn.run("config_service.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
