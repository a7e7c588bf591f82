"""Pydantic schemas."""
from config_service.schemas.schemas import (
    EnvironmentBase, EnvironmentCreate, EnvironmentUpdate, EnvironmentPatch, EnvironmentResponse,
    EnvironmentEnvelope, EnvironmentPage,
    VariableBase, VariableCreate, VariableUpdate, VariableResponse,
    VariableEnvelope, VariablePage,
    ErrorResponse
)

__all__ = [
    "EnvironmentBase", "EnvironmentCreate", "EnvironmentUpdate", "EnvironmentPatch",
    "EnvironmentResponse", "EnvironmentEnvelope", "EnvironmentPage",
    "VariableBase", "VariableCreate", "VariableUpdate", "VariableResponse",
    "VariableEnvelope", "VariablePage",
    "ErrorResponse"
]
