"""Payment mappings."""

from dataclasses import replace

from roadready.application.dtos.payment import PaymentDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.payment import Payment


def payment_to_dto(payment: Payment) -> PaymentDTO:
    return PaymentDTO(
        payment_id=payment.payment_id,
        reservation_id=payment.reservation_id,
        amount=payment.amount,
        payment_date=payment.payment_date,
        payment_method=payment.payment_method,
        payment_status=payment.payment_status,
    )


def payment_from_dto(dto: PaymentDTO) -> Payment:
    return Payment(
        payment_id=dto.payment_id,
        reservation_id=dto.reservation_id,
        amount=dto.amount,
        payment_date=dto.payment_date,
        payment_method=dto.payment_method,
        payment_status=dto.payment_status,
    )


def merge_payment(dto: PaymentDTO, payment: Payment) -> Payment:
    return replace(payment_from_dto(dto), payment_id=payment.payment_id)


payment_mapper: EntityMapper[Payment, PaymentDTO] = EntityMapper(
    to_dto=payment_to_dto,
    to_entity=payment_from_dto,
    merge=merge_payment,
    dto_id=lambda dto: dto.payment_id,
)
