"""Pydantic schemas for request/response validation."""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from config_service.models.models import NAME_MAX_LENGTH


# --- Environment Schemas ---
class EnvironmentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = None


class EnvironmentCreate(EnvironmentBase):
    pass


class EnvironmentUpdate(BaseModel):
    """PUT body. ``name`` is accepted but ignored: it is part of the URL."""
    name: Optional[str] = None
    description: Optional[str] = None


class EnvironmentPatch(BaseModel):
    description: Optional[str] = None


class EnvironmentResponse(EnvironmentBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EnvironmentEnvelope(BaseModel):
    message: str
    data: EnvironmentResponse


class EnvironmentPage(BaseModel):
    total_items: int
    total_pages: int
    current_page: int
    environments: List[EnvironmentResponse]


# --- Variable Schemas ---
class VariableBase(BaseModel):
    """``value`` must be a JSON string and is stored verbatim. Numbers and
    booleans (e.g. ``5432``) are rejected with a 400, not coerced to text.
    """
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    value: str
    description: Optional[str] = None
    is_sensitive: bool = False


class VariableCreate(VariableBase):
    pass


class VariableUpdate(BaseModel):
    """Body for PUT and PATCH; omitted fields keep their stored value."""
    name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    value: Optional[str] = None
    description: Optional[str] = None
    is_sensitive: Optional[bool] = None


class VariableResponse(VariableBase):
    id: int
    environment_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class VariableEnvelope(BaseModel):
    message: str
    data: VariableResponse


class VariablePage(BaseModel):
    environment_name: str
    total_items: int
    total_pages: int
    current_page: int
    variables: List[VariableResponse]


# --- Error body shared by every failure path ---
class ErrorResponse(BaseModel):
    error: str
    message: str
