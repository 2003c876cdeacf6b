"""Car DTOs."""

from typing import Optional

from pydantic import ConfigDict, Field

from roadready.application.dtos.base import DTO, EntityId, Money


class CarDTO(DTO):
    """Car DTO."""

    car_id: Optional[EntityId] = None
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int = Field(ge=1886)
    color: Optional[str] = None
    location: Optional[str] = None
    price_per_day: Money
    availability_status: bool = True
    image_url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "carId": 1,
                "make": "Toyota",
                "model": "Corolla",
                "year": 2022,
                "color": "White",
                "location": "Downtown",
                "pricePerDay": 45.0,
                "availabilityStatus": True,
            }
        }
    )
