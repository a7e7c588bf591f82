"""Environment repository: lookup, uniqueness and cascade deletion."""
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from config_service.models import Environment
from config_service.models.models import NAME_MAX_LENGTH
from config_service import schemas
from config_service.core.exceptions import ResourceValidationError
from config_service.core.logging_config import logger
from config_service.services.naming import normalize_environment_name
from config_service.services.pagination import Pagination


def list_environments(db: Session, pagination: Pagination) -> Tuple[List[Environment], int]:
    """Return one page of environments ordered by name, plus the total count."""
    total = db.query(Environment).count()
    environments = db.query(Environment)\
        .order_by(Environment.name.asc())\
        .offset(pagination.offset)\
        .limit(pagination.limit)\
        .all()
    return environments, total


def get_environment_by_name(db: Session, name: str) -> Optional[Environment]:
    """Case-insensitive lookup; None when absent."""
    return db.query(Environment)\
        .filter(Environment.name == normalize_environment_name(name))\
        .first()


def create_environment(db: Session, environment: schemas.EnvironmentCreate) -> Environment:
    """Create an environment. The name is upper-cased before it reaches the store."""
    name = normalize_environment_name(environment.name)
    if not name:
        raise ResourceValidationError("Environment name cannot be empty.")
    # Upper-casing can lengthen a name ("ß" -> "SS")
    if len(name) > NAME_MAX_LENGTH:
        raise ResourceValidationError(
            f"Environment name cannot exceed {NAME_MAX_LENGTH} characters once upper-cased."
        )

    db_environment = Environment(name=name, description=environment.description)
    try:
        db.add(db_environment)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected environment {name}: {e.orig}")
        raise ResourceValidationError(f"Environment '{name}' already exists.")
    db.refresh(db_environment)
    logger.info(f"Environment created: {db_environment.name} (ID: {db_environment.id})")
    return db_environment


def update_environment(db: Session, environment: Environment, description: Optional[str]) -> Environment:
    """Replace the description. The name is never changed so the URL stays stable."""
    environment.description = description
    db.commit()
    db.refresh(environment)
    logger.info(f"Environment updated: {environment.name} (ID: {environment.id})")
    return environment


def delete_environment(db: Session, environment: Environment) -> None:
    """Delete the environment; its variables go with it (ON DELETE CASCADE)."""
    name, environment_id = environment.name, environment.id
    db.delete(environment)
    db.commit()
    logger.info(f"Environment deleted with its variables: {name} (ID: {environment_id})")
