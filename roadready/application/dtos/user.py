"""User DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from roadready.application.dtos.base import DTO, EntityId


class UserDTO(DTO):
    """Full user DTO."""

    user_id: Optional[EntityId] = None
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: Optional[str] = None
    role: str = "Customer"
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "userId": 1,
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "phoneNumber": "+441234567890",
                "role": "Customer",
            }
        }
    )


class UserPublicDTO(DTO):
    """Public-safe user projection returned to agents."""

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
