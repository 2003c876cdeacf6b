"""Reservation mappings."""

from dataclasses import replace

from roadready.application.dtos.reservation import ReservationDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.reservation import Reservation


def reservation_to_dto(reservation: Reservation) -> ReservationDTO:
    return ReservationDTO(
        reservation_id=reservation.reservation_id,
        user_id=reservation.user_id,
        car_id=reservation.car_id,
        pickup_date=reservation.pickup_date,
        dropoff_date=reservation.dropoff_date,
        total_price=reservation.total_price,
        status=reservation.status,
        extra_ids=sorted(reservation.extra_ids),
    )


def reservation_from_dto(dto: ReservationDTO) -> Reservation:
    return Reservation(
        reservation_id=dto.reservation_id,
        user_id=dto.user_id,
        car_id=dto.car_id,
        pickup_date=dto.pickup_date,
        dropoff_date=dto.dropoff_date,
        total_price=dto.total_price,
        status=dto.status,
        extra_ids=list(dict.fromkeys(dto.extra_ids)),  # drop duplicates, keep order
    )


def merge_reservation(dto: ReservationDTO, reservation: Reservation) -> Reservation:
    return replace(reservation_from_dto(dto), reservation_id=reservation.reservation_id)


reservation_mapper: EntityMapper[Reservation, ReservationDTO] = EntityMapper(
    to_dto=reservation_to_dto,
    to_entity=reservation_from_dto,
    merge=merge_reservation,
    dto_id=lambda dto: dto.reservation_id,
)
