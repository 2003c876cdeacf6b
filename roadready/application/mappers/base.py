"""Mapper bundle shared by the CRUD use case."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

E = TypeVar("E")
D = TypeVar("D")


@dataclass(frozen=True)
class EntityMapper(Generic[E, D]):
    """
    Conversions between one entity type and its DTO.

    Attributes:
        to_dto: Build the DTO for an entity
        to_entity: Build a new entity from a DTO
        merge: Copy every DTO field onto an existing entity, keeping its identifier
        dto_id: Read the identifier carried by a DTO, if any
    """

    to_dto: Callable[[E], D]
    to_entity: Callable[[D], E]
    merge: Callable[[D, E], E]
    dto_id: Callable[[D], Optional[int]]
