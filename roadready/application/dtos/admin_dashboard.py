"""Admin dashboard DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from roadready.application.dtos.base import DTO, EntityId, Money


class AdminDashboardDataDTO(DTO):
    """Admin dashboard snapshot DTO."""

    dashboard_id: Optional[EntityId] = None
    total_reservations: int = Field(default=0, ge=0)
    total_revenue: Money = Decimal("0")
    total_users: int = Field(default=0, ge=0)
    total_cars: int = Field(default=0, ge=0)
    total_reviews: int = Field(default=0, ge=0)
    created_at: Optional[datetime] = None
