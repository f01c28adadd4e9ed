"""Transaction category entity."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from kakeibo.domain.statistics.value_objects import TransactionType


class Category(BaseModel):
    """A category transactions are grouped by.

    ``id`` is the stable numeric identifier stored on transactions and must
    never be reused for a different category.
    """

    id: int
    name: str
    type: TransactionType
    color: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            msg = "Category name cannot be empty"
            raise ValueError(msg)
        return v
