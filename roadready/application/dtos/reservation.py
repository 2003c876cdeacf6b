"""Reservation DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, model_validator

from roadready.application.dtos.base import DTO, EntityId, ForeignKeyId, Money


class ReservationDTO(DTO):
    """Reservation DTO."""

    reservation_id: Optional[EntityId] = None
    user_id: ForeignKeyId
    car_id: ForeignKeyId
    pickup_date: datetime
    dropoff_date: datetime
    total_price: Money
    status: str = "Pending"
    extra_ids: list[ForeignKeyId] = []

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "reservationId": 1,
                "userId": 3,
                "carId": 7,
                "pickupDate": "2024-06-01T10:00:00Z",
                "dropoffDate": "2024-06-05T10:00:00Z",
                "totalPrice": 180.0,
                "status": "Confirmed",
                "extraIds": [1, 2],
            }
        }
    )

    @model_validator(mode="after")
    def _check_dates(self) -> "ReservationDTO":
        if self.dropoff_date < self.pickup_date:
            raise ValueError("dropoffDate must not be earlier than pickupDate")
        return self
