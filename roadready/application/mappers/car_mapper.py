"""Car mappings."""

from dataclasses import replace

from roadready.application.dtos.car import CarDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.car import Car


def car_to_dto(car: Car) -> CarDTO:
    return CarDTO(
        car_id=car.car_id,
        make=car.make,
        model=car.model,
        year=car.year,
        color=car.color,
        location=car.location,
        price_per_day=car.price_per_day,
        availability_status=car.availability_status,
        image_url=car.image_url,
    )


def car_from_dto(dto: CarDTO) -> Car:
    return Car(
        car_id=dto.car_id,
        make=dto.make,
        model=dto.model,
        year=dto.year,
        color=dto.color,
        location=dto.location,
        price_per_day=dto.price_per_day,
        availability_status=dto.availability_status,
        image_url=dto.image_url,
    )


def merge_car(dto: CarDTO, car: Car) -> Car:
    return replace(car_from_dto(dto), car_id=car.car_id)


car_mapper: EntityMapper[Car, CarDTO] = EntityMapper(
    to_dto=car_to_dto,
    to_entity=car_from_dto,
    merge=merge_car,
    dto_id=lambda dto: dto.car_id,
)
