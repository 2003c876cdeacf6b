"""Generic CRUD use case shared by the resource routes."""

from typing import Generic, TypeVar

from roadready.application.errors import NotFoundError, ValidationError
from roadready.application.mappers.base import EntityMapper
from roadready.application.ports.repository import Repository

E = TypeVar("E")
D = TypeVar("D")


class CrudUseCase(Generic[E, D]):
    """
    List, fetch, create, replace and delete one resource type.

    Failures are raised as application errors; translating them to HTTP
    responses is the HTTP adapter's job.
    """

    def __init__(
        self,
        repository: Repository[E],
        mapper: EntityMapper[E, D],
        resource_name: str,
        plural_name: str,
    ) -> None:
        """
        Initialize use case.

        Args:
            repository: Repository for the resource's entity type
            mapper: Entity <-> DTO conversions
            resource_name: Singular name used in messages (e.g., 'Payment')
            plural_name: Plural name used in messages (e.g., 'payments')
        """
        self._repository = repository
        self._mapper = mapper
        self._resource_name = resource_name
        self._plural_name = plural_name

    def not_found(self, entity_id: int) -> NotFoundError:
        return NotFoundError(f"{self._resource_name} with ID {entity_id} not found.")

    async def list_all(self) -> list[D]:
        """
        List every stored resource.

        Returns:
            Mapped DTOs

        Raises:
            NotFoundError: If nothing is stored (an empty listing is a 404)
        """
        entities = await self._repository.get_all()
        if not entities:
            raise NotFoundError(f"No {self._plural_name} found.")
        return [self._mapper.to_dto(entity) for entity in entities]

    async def get(self, entity_id: int) -> D:
        """
        Fetch one resource.

        Raises:
            NotFoundError: If no row has the identifier
        """
        entity = await self._repository.get_by_id(entity_id)
        if entity is None:
            raise self.not_found(entity_id)
        return self._mapper.to_dto(entity)

    async def create(self, dto: D) -> D:
        """
        Persist a new resource.

        Args:
            dto: Validated payload

        Returns:
            DTO of the stored entity, including its assigned identifier
        """
        entity = self._mapper.to_entity(dto)
        await self._repository.add(entity)
        return self._mapper.to_dto(entity)

    async def update(self, entity_id: int, dto: D) -> None:
        """
        Replace every field of an existing resource.

        Args:
            entity_id: Identifier taken from the request path
            dto: Validated payload; its identifier must match the path

        Raises:
            ValidationError: On path/body identifier mismatch, before any repository call
            NotFoundError: If no row has the identifier
        """
        if self._mapper.dto_id(dto) != entity_id:
            raise ValidationError(f"{self._resource_name} ID mismatch.")

        existing = await self._repository.get_by_id(entity_id)
        if existing is None:
            raise self.not_found(entity_id)

        await self._repository.update(self._mapper.merge(dto, existing))

    async def delete(self, entity_id: int) -> None:
        """
        Delete an existing resource.

        Raises:
            NotFoundError: If no row has the identifier
        """
        existing = await self._repository.get_by_id(entity_id)
        if existing is None:
            raise self.not_found(entity_id)
        await self._repository.delete(entity_id)
