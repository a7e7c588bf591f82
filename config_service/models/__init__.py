"""SQLAlchemy models."""
from config_service.models.models import Environment, Variable
from config_service.core.database import Base

__all__ = ["Environment", "Variable", "Base"]
