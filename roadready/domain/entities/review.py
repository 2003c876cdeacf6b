"""Review entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Review:
    """A customer review of a car."""

    car_id: int
    rating: int
    user_id: Optional[int] = None
    comment: Optional[str] = None
    review_date: Optional[datetime] = None
    review_id: Optional[int] = None
