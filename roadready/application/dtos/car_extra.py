"""Car extra DTOs."""

from typing import Optional

from pydantic import Field

from roadready.application.dtos.base import DTO, EntityId, Money


class CarExtraDTO(DTO):
    """Car extra DTO."""

    extra_id: Optional[EntityId] = None
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Optional[Money] = None
