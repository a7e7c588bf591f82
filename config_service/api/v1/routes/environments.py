"""Environment endpoints, including the flattened ``.json`` dump."""
from typing import Dict, Optional
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from config_service import crud, schemas
from config_service.api.deps import get_db, get_environment_or_404
from config_service.models import Environment
from config_service.services.flattening import flatten_variables
from config_service.services.naming import JSON_SUFFIX
from config_service.services.pagination import parse_pagination, total_pages

router = APIRouter(responses={
    status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": schemas.ErrorResponse}
})


# Registered before the detail route: "/environments/PROD.json" must land here.
@router.get("/environments/{env_name}.json", response_model=Dict[str, str])
def get_environment_config(
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    """Massive consumption: every variable of the environment as {name: value}."""
    return flatten_variables(crud.list_all_variables(db, environment))


@router.get("/environments/", response_model=schemas.EnvironmentPage)
def list_environments_api(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Paginated list ordered by name."""
    pagination = parse_pagination(page, limit)
    environments, count = crud.list_environments(db, pagination)
    return {
        "total_items": count,
        "total_pages": total_pages(count, pagination.limit),
        "current_page": pagination.page,
        "environments": environments
    }


@router.post("/environments/", response_model=schemas.EnvironmentEnvelope,
             status_code=status.HTTP_201_CREATED)
def create_environment_api(
    environment: schemas.EnvironmentCreate,
    db: Session = Depends(get_db)
):
    db_environment = crud.create_environment(db, environment)
    return {"message": "Environment created successfully", "data": db_environment}


@router.get("/environments/{env_name}", response_model=schemas.EnvironmentEnvelope)
def get_environment_api(
    env_name: str,
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    # The ".json" route above only matches the lower-case suffix; "PROD.JSON" lands here
    if env_name.lower().endswith(JSON_SUFFIX):
        return JSONResponse(content=flatten_variables(crud.list_all_variables(db, environment)))
    return {"message": f"Details for environment: {environment.name}", "data": environment}


@router.put("/environments/{env_name}", response_model=schemas.EnvironmentEnvelope)
def update_environment_api(
    update: schemas.EnvironmentUpdate,
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    """Full update. Only the description is writable; a body ``name`` is ignored."""
    environment = crud.update_environment(db, environment, update.description)
    return {
        "message": f"Environment {environment.name} fully updated (description only)",
        "data": environment
    }


@router.patch("/environments/{env_name}", response_model=schemas.EnvironmentEnvelope)
def patch_environment_api(
    update: schemas.EnvironmentPatch,
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    """Partial update. The description changes only when present in the body."""
    if "description" in update.model_fields_set:
        environment = crud.update_environment(db, environment, update.description)
    return {"message": f"Environment {environment.name} partially updated", "data": environment}


@router.delete("/environments/{env_name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_environment_api(
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    """Delete the environment and, through the cascade, all its variables."""
    crud.delete_environment(db, environment)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
