"""SQLAlchemy database models."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, expression
from config_service.core.database import Base

NAME_MAX_LENGTH = 100


# Named namespace of configuration variables (e.g. "PRODUCTION").
# Fields:
# 1. id: primary key
# 2. name: unique, stored upper-cased (see services.naming)
# 3. description: optional free text
#
# Relationships:
# 1. variables: One-to-Many, removed together with the environment.
#    The foreign key carries ON DELETE CASCADE so the store does the deleting.
class Environment(Base):
    __tablename__ = "environments"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(NAME_MAX_LENGTH), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    variables = relationship(
        "Variable",
        back_populates="environment",
        order_by="Variable.name",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


# Single key/value pair scoped to one environment.
# (environment_id, name) is unique; the same name may repeat across environments.
class Variable(Base):
    __tablename__ = "variables"
    __table_args__ = (
        UniqueConstraint("environment_id", "name", name="uq_variables_environment_id_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    value = Column(Text, nullable=False)  # stored verbatim
    description = Column(Text, nullable=True)
    is_sensitive = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    environment_id = Column(
        Integer, ForeignKey("environments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    environment = relationship("Environment", back_populates="variables")
