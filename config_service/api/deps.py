"""API dependencies.

Path parameters are resolved to entities here and handed to the routes as
plain arguments; a missing entity ends the request with a 404.
"""
from fastapi import Depends
from sqlalchemy.orm import Session
from config_service import crud
from config_service.core.database import get_db
from config_service.core.exceptions import ResourceNotFoundError
from config_service.core.logging_config import logger
from config_service.models import Environment, Variable
from config_service.services.naming import resolve_environment_name


def get_environment_or_404(env_name: str, db: Session = Depends(get_db)) -> Environment:
    """Resolve ``env_name`` (any case, optional ``.json`` suffix) to an Environment."""
    name = resolve_environment_name(env_name)
    environment = crud.get_environment_by_name(db, name)
    if not environment:
        logger.warning(f"Environment not found: {name}")
        raise ResourceNotFoundError(f"Environment '{name}' not found.")
    return environment


def get_variable_or_404(
    var_name: str,
    environment: Environment = Depends(get_environment_or_404),
    db: Session = Depends(get_db)
) -> Variable:
    """Resolve ``var_name`` inside an already resolved environment."""
    variable = crud.get_variable_by_name(db, environment, var_name)
    if not variable:
        logger.warning(f"Variable not found: {var_name} in {environment.name}")
        raise ResourceNotFoundError(
            f"Variable '{var_name}' not found in environment '{environment.name}'."
        )
    return variable


__all__ = ["get_db", "get_environment_or_404", "get_variable_or_404"]
