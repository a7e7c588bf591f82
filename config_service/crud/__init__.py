"""Database CRUD operations."""
from config_service.crud.environments import (
    list_environments,
    create_environment,
    get_environment_by_name,
    update_environment,
    delete_environment
)
from config_service.crud.variables import (
    list_variables,
    list_all_variables,
    create_variable,
    get_variable_by_name,
    replace_variable,
    patch_variable,
    delete_variable
)

__all__ = [
    "list_environments",
    "create_environment",
    "get_environment_by_name",
    "update_environment",
    "delete_environment",
    "list_variables",
    "list_all_variables",
    "create_variable",
    "get_variable_by_name",
    "replace_variable",
    "patch_variable",
    "delete_variable"
]
