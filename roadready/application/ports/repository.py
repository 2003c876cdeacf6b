"""Generic repository port."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

E = TypeVar("E")


class Repository(ABC, Generic[E]):
    """Port interface for CRUD access to one entity type."""

    @abstractmethod
    async def get_all(self) -> list[E]:
        """
        Get every stored entity.

        Returns:
            List of entities (empty when nothing is stored)
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[E]:
        """
        Get an entity by its identifier.

        Args:
            entity_id: Surrogate identifier

        Returns:
            Entity, or None if not found
        """
        pass

    @abstractmethod
    async def add(self, entity: E) -> None:
        """
        Persist a new entity and assign its identifier onto it.

        Args:
            entity: Entity to add; a preset identifier is honoured

        Raises:
            DuplicateResourceError: If the preset identifier is already taken
            ConflictError: If the row breaks another database constraint
        """
        pass

    @abstractmethod
    async def update(self, entity: E) -> None:
        """
        Replace every field of the stored row matching the entity's identifier.

        Args:
            entity: Entity carrying the new field values
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """
        Delete an entity. Deleting a missing row is a no-op.

        Args:
            entity_id: Surrogate identifier

        Raises:
            ResourceInUseError: If other rows still reference the entity
        """
        pass
