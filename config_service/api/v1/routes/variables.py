"""Variable endpoints, scoped under an environment."""
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from config_service import crud, schemas
from config_service.api.deps import get_db, get_environment_or_404, get_variable_or_404
from config_service.models import Environment, Variable
from config_service.services.pagination import parse_pagination, total_pages

router = APIRouter(
    prefix="/environments/{env_name}/variables",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": schemas.ErrorResponse}
    }
)


@router.get("", response_model=schemas.VariablePage)
def list_variables_api(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    pagination = parse_pagination(page, limit)
    variables, count = crud.list_variables(db, environment, pagination)
    return {
        "environment_name": environment.name,
        "total_items": count,
        "total_pages": total_pages(count, pagination.limit),
        "current_page": pagination.page,
        "variables": variables
    }


@router.post("", response_model=schemas.VariableEnvelope, status_code=status.HTTP_201_CREATED)
def create_variable_api(
    variable: schemas.VariableCreate,
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
):
    db_variable = crud.create_variable(db, environment, variable)
    return {
        "message": f"Variable '{db_variable.name}' created in {environment.name}",
        "data": db_variable
    }


@router.get("/{var_name}", response_model=schemas.VariableEnvelope)
def get_variable_api(
    environment: Environment = Depends(get_environment_or_404),
    variable: Variable = Depends(get_variable_or_404)
):
    return {
        "message": f"Details for variable: {variable.name} in {environment.name}",
        "data": variable
    }


@router.put("/{var_name}", response_model=schemas.VariableEnvelope)
def update_variable_api(
    update: schemas.VariableUpdate,
    environment: Environment = Depends(get_environment_or_404),
    variable: Variable = Depends(get_variable_or_404),
    db: Session = Depends(get_db)
):
    """Full update. Fields left out of the body keep their current values."""
    variable = crud.replace_variable(db, environment, variable, update)
    return {
        "message": f"Variable {variable.name} in {environment.name} fully updated",
        "data": variable
    }


@router.patch("/{var_name}", response_model=schemas.VariableEnvelope)
def patch_variable_api(
    update: schemas.VariableUpdate,
    environment: Environment = Depends(get_environment_or_404),
    variable: Variable = Depends(get_variable_or_404),
    db: Session = Depends(get_db)
):
    variable = crud.patch_variable(db, environment, variable, update)
    return {
        "message": f"Variable {variable.name} in {environment.name} partially updated",
        "data": variable
    }


@router.delete("/{var_name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_variable_api(
    environment: Environment = Depends(get_environment_or_404),
    variable: Variable = Depends(get_variable_or_404),
    db: Session = Depends(get_db)
):
    crud.delete_variable(db, environment, variable)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
