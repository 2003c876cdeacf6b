"""Base DTO class and shared field types."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal amounts travel as JSON numbers, never negative
Money = Annotated[
    Decimal,
    Field(ge=0, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Surrogate identifier of a row; storage never assigns zero or negatives
EntityId = Annotated[int, Field(gt=0)]

# Identifier of a referenced row
ForeignKeyId = EntityId


class DTO(BaseModel):
    """Base class for application DTOs, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
