"""Variable repository: per-environment uniqueness and merge/partial updates."""
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from config_service.models import Environment, Variable
from config_service import schemas
from config_service.core.exceptions import ResourceNotFoundError, ResourceValidationError
from config_service.core.logging_config import logger
from config_service.services.pagination import Pagination

UPDATABLE_FIELDS = ("name", "value", "description", "is_sensitive")
NON_NULLABLE_FIELDS = ("name", "value", "is_sensitive")


def list_variables(db: Session, environment: Environment, pagination: Pagination) -> Tuple[List[Variable], int]:
    """Return one page of the environment's variables ordered by name, plus the total count."""
    query = db.query(Variable).filter(Variable.environment_id == environment.id)
    total = query.count()
    variables = query.order_by(Variable.name.asc())\
        .offset(pagination.offset)\
        .limit(pagination.limit)\
        .all()
    return variables, total


def list_all_variables(db: Session, environment: Environment) -> List[Variable]:
    """Every variable of the environment, unpaginated."""
    return db.query(Variable)\
        .filter(Variable.environment_id == environment.id)\
        .order_by(Variable.name.asc())\
        .all()


def get_variable_by_name(db: Session, environment: Environment, name: str) -> Optional[Variable]:
    """Exact-match lookup scoped to one environment; None when absent."""
    return db.query(Variable)\
        .filter(Variable.environment_id == environment.id, Variable.name == name)\
        .first()


def _commit_or_reject(db: Session, variable: Variable, environment_name: str) -> None:
    attempted_name = variable.name
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected variable {attempted_name} in {environment_name}: {e.orig}")
        # The environment was deleted between lookup and write
        if "foreign key" in str(e.orig).lower():
            raise ResourceNotFoundError(f"Environment '{environment_name}' not found.")
        raise ResourceValidationError(
            f"Variable '{attempted_name}' already exists in environment '{environment_name}'."
        )
    db.refresh(variable)


def create_variable(db: Session, environment: Environment, variable: schemas.VariableCreate) -> Variable:
    """Create a variable under an existing environment."""
    db_variable = Variable(
        name=variable.name,
        value=variable.value,
        description=variable.description,
        is_sensitive=variable.is_sensitive,
        environment_id=environment.id,
    )
    db.add(db_variable)
    _commit_or_reject(db, db_variable, environment.name)
    logger.info(f"Variable created: {db_variable.name} in {environment.name} (ID: {db_variable.id})")
    return db_variable


def _apply(db: Session, environment: Environment, variable: Variable, fields: Dict[str, Any]) -> Variable:
    for field in NON_NULLABLE_FIELDS:
        if field in fields and fields[field] is None:
            raise ResourceValidationError(f"Variable {field} cannot be null.")
    for field, value in fields.items():
        if field in UPDATABLE_FIELDS:
            setattr(variable, field, value)
    _commit_or_reject(db, variable, environment.name)
    logger.info(f"Variable updated: {variable.name} in {environment.name} (ID: {variable.id})")
    return variable


def replace_variable(db: Session, environment: Environment, variable: Variable,
                     update: schemas.VariableUpdate) -> Variable:
    """PUT semantics: every field is written, but a field left out of the body
    keeps its current value. This merges rather than clears.
    """
    provided = update.model_dump(exclude_unset=True)
    fields = {field: provided.get(field, getattr(variable, field)) for field in UPDATABLE_FIELDS}
    return _apply(db, environment, variable, fields)


def patch_variable(db: Session, environment: Environment, variable: Variable,
                   update: schemas.VariableUpdate) -> Variable:
    """PATCH semantics: only the fields present in the request body are written."""
    return _apply(db, environment, variable, update.model_dump(exclude_unset=True))


def delete_variable(db: Session, environment: Environment, variable: Variable) -> None:
    name, variable_id = variable.name, variable.id
    db.delete(variable)
    db.commit()
    logger.info(f"Variable deleted: {name} in {environment.name} (ID: {variable_id})")
