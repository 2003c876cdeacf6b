"""Review DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roadready.application.dtos.base import DTO, EntityId, ForeignKeyId


class ReviewDTO(DTO):
    """Review DTO."""

    review_id: Optional[EntityId] = None
    car_id: int  # checked by ReviewUseCase so a clear message is returned
    user_id: Optional[ForeignKeyId] = None
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    review_date: Optional[datetime] = None
