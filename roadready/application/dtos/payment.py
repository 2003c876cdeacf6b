"""Payment DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from roadready.application.dtos.base import DTO, EntityId, ForeignKeyId, Money


class PaymentDTO(DTO):
    """Payment DTO."""

    payment_id: Optional[EntityId] = None
    reservation_id: ForeignKeyId
    amount: Money
    payment_date: Optional[datetime] = None
    payment_method: Optional[str] = None
    payment_status: str = "Pending"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "paymentId": 1,
                "reservationId": 4,
                "amount": 180.0,
                "paymentDate": "2024-06-01T09:30:00Z",
                "paymentMethod": "CreditCard",
                "paymentStatus": "Completed",
            }
        }
    )
