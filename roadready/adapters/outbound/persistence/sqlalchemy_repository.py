"""Shared SQLAlchemy repository adapter."""

from dataclasses import fields
from datetime import datetime, timezone
from typing import Callable, Generic, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roadready.application.errors import (
    ConflictError,
    DuplicateResourceError,
    NotFoundError,
    ResourceInUseError,
)
from roadready.infrastructure.db import get_db_session
from roadready.infrastructure.logging.logger import log_repository_error

E = TypeVar("E")
M = TypeVar("M")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Ensure a datetime is timezone-aware (SQLite returns naive datetimes)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlAlchemyRepository(Generic[E, M]):
    """
    CRUD over one ORM model, converting rows to domain entities.

    Subclasses set ``model``, ``id_field`` and ``resource_name`` and implement
    ``_to_entity`` and ``_apply``. Every call opens its own session and closes
    it before returning. Constraint violations become ``ConflictError`` subclasses;
    other storage errors are logged and re-raised unchanged.
    """

    model: type[M]
    id_field: str
    resource_name: str

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None) -> None:
        """
        Initialize repository.

        Args:
            session_factory: Callable returning a new session (defaults to the app engine)
        """
        self._session_factory = session_factory

    def _session(self) -> Session:
        if self._session_factory is not None:
            return self._session_factory()
        return get_db_session()

    def _to_entity(self, model: M) -> E:
        """Convert an ORM row to a domain entity."""
        raise NotImplementedError

    def _apply(self, entity: E, model: M, db: Session) -> None:
        """Copy every mutable entity field onto an ORM row."""
        raise NotImplementedError

    def _log_error(self, operation: str, error: Exception, **kwargs) -> None:
        log_repository_error(type(self).__name__, operation, error, **kwargs)

    async def get_all(self) -> list[E]:
        db = self._session()
        try:
            id_column = getattr(self.model, self.id_field)
            models = db.query(self.model).order_by(id_column).all()
            return [self._to_entity(model) for model in models]
        except SQLAlchemyError as e:
            self._log_error("get_all", e)
            raise
        finally:
            db.close()

    async def get_by_id(self, entity_id: int) -> Optional[E]:
        db = self._session()
        try:
            model = db.get(self.model, entity_id)
            if model is None:
                return None
            return self._to_entity(model)
        except SQLAlchemyError as e:
            self._log_error("get_by_id", e, entity_id=entity_id)
            raise
        finally:
            db.close()

    async def add(self, entity: E) -> None:
        db = self._session()
        entity_id = getattr(entity, self.id_field)
        try:
            model = self.model()
            if entity_id is not None:
                setattr(model, self.id_field, entity_id)
            self._apply(entity, model, db)
            db.add(model)
            db.flush()
            if entity_id is not None:
                self._advance_id_sequence(db)
            db.commit()

            # Reflect the assigned identifier and column defaults back onto the caller's entity
            stored = self._to_entity(model)
            for field in fields(stored):
                setattr(entity, field.name, getattr(stored, field.name))
        except IntegrityError as e:
            db.rollback()
            self._log_error("add", e, entity_id=entity_id)
            if entity_id is not None and db.get(self.model, entity_id) is not None:
                raise DuplicateResourceError(
                    f"{self.resource_name} with ID {entity_id} already exists."
                ) from e
            raise ConflictError(
                f"{self.resource_name} conflicts with existing records."
            ) from e
        except SQLAlchemyError as e:
            db.rollback()
            self._log_error("add", e, entity_id=entity_id)
            raise
        finally:
            db.close()

    async def update(self, entity: E) -> None:
        db = self._session()
        entity_id = getattr(entity, self.id_field)
        try:
            model = db.get(self.model, entity_id) if entity_id is not None else None
            if model is None:
                raise NotFoundError(f"{self.resource_name} with ID {entity_id} not found.")
            self._apply(entity, model, db)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            self._log_error("update", e, entity_id=entity_id)
            raise ConflictError(
                f"{self.resource_name} with ID {entity_id} conflicts with existing records."
            ) from e
        except SQLAlchemyError as e:
            db.rollback()
            self._log_error("update", e, entity_id=entity_id)
            raise
        finally:
            db.close()

    async def delete(self, entity_id: int) -> None:
        db = self._session()
        try:
            model = db.get(self.model, entity_id)
            if model is None:
                return
            db.delete(model)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            self._log_error("delete", e, entity_id=entity_id)
            raise ResourceInUseError(
                f"{self.resource_name} with ID {entity_id} is still referenced by other records."
            ) from e
        except SQLAlchemyError as e:
            db.rollback()
            self._log_error("delete", e, entity_id=entity_id)
            raise
        finally:
            db.close()

    def _advance_id_sequence(self, db: Session) -> None:
        """Move a PostgreSQL serial sequence past explicitly inserted identifiers."""
        if db.get_bind().dialect.name != "postgresql":
            return
        table = self.model.__tablename__
        db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', '{self.id_field}'), "
                f"(SELECT MAX({self.id_field}) FROM {table}))"
            )
        )
