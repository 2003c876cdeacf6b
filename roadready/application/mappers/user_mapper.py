"""User mappings."""

from dataclasses import replace

from roadready.application.dtos.user import UserDTO, UserPublicDTO
from roadready.application.mappers.base import EntityMapper
from roadready.domain.entities.user import User


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        user_id=user.user_id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone_number=user.phone_number,
        role=user.role,
        created_at=user.created_at,
    )


def user_to_public_dto(dto: UserDTO) -> UserPublicDTO:
    return UserPublicDTO(
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        phone_number=dto.phone_number,
    )


def user_from_dto(dto: UserDTO) -> User:
    return User(
        user_id=dto.user_id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        phone_number=dto.phone_number,
        role=dto.role,
        created_at=dto.created_at,
    )


def merge_user(dto: UserDTO, user: User) -> User:
    # created_at is kept when the payload omits it
    return replace(
        user,
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        phone_number=dto.phone_number,
        role=dto.role,
        created_at=dto.created_at or user.created_at,
    )


user_mapper: EntityMapper[User, UserDTO] = EntityMapper(
    to_dto=user_to_dto,
    to_entity=user_from_dto,
    merge=merge_user,
    dto_id=lambda dto: dto.user_id,
)
