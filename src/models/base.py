"""Declarative base for sink tables and the shared entity base."""

from datetime import datetime
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base
from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Base = declarative_base()

# Width of every text column; validation only warns about long values
MAX_TEXT_LENGTH = 255


class BaseModel(Base):
    """Abstract table carrying audit timestamps."""
    __abstract__ = True

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class BasePydanticModel(PydanticBaseModel):
    """Base for pipeline entities.

    Entities are immutable: every pipeline phase builds new instances with
    ``model_copy(update=...)``. JSON output uses the camelCase names of the
    source feeds.
    """

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict:
        """Serialize with source field names."""
        return self.model_dump(mode='json', by_alias=True)
