"""Car extra mappings."""

from dataclasses import replace

from roadready.application.dtos.car_extra import CarExtraDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.car_extra import CarExtra


def car_extra_to_dto(extra: CarExtra) -> CarExtraDTO:
    return CarExtraDTO(
        extra_id=extra.extra_id,
        name=extra.name,
        description=extra.description,
        price=extra.price,
    )


def car_extra_from_dto(dto: CarExtraDTO) -> CarExtra:
    return CarExtra(
        extra_id=dto.extra_id,
        name=dto.name,
        description=dto.description,
        price=dto.price,
    )


def merge_car_extra(dto: CarExtraDTO, extra: CarExtra) -> CarExtra:
    return replace(car_extra_from_dto(dto), extra_id=extra.extra_id)


car_extra_mapper: EntityMapper[CarExtra, CarExtraDTO] = EntityMapper(
    to_dto=car_extra_to_dto,
    to_entity=car_extra_from_dto,
    merge=merge_car_extra,
    dto_id=lambda dto: dto.extra_id,
)
