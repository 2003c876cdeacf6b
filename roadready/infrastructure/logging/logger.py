"""Structured logger for observability."""

import logging
from typing import Any

_logger = logging.getLogger("roadready")
_logger.setLevel(logging.INFO)

if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def _format_fields(fields: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v!r}" for k, v in fields.items())


def log_event(component: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'repository', 'auth')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields: dict[str, Any] = {"component": component}
    fields.update(kwargs)
    _logger.log(level, _format_fields(fields))


def log_request(resource: str, action: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """
    Log a handled request against a resource.

    Args:
        resource: Resource name (e.g., 'payments')
        action: Action performed (e.g., 'create', 'delete')
        level: Log level (default: INFO)
        **kwargs: Additional fields such as the affected identifier
    """
    log_event("http", level=level, resource=resource, action=action, **kwargs)


def log_repository_error(repository: str, operation: str, error: Exception, **kwargs: Any) -> None:
    """
    Log a storage failure raised inside a repository.

    Args:
        repository: Repository class name
        operation: Repository operation (e.g., 'add', 'get_by_id')
        error: The exception raised by the storage layer
        **kwargs: Additional fields
    """
    log_event(
        "repository",
        level=logging.ERROR,
        repository=repository,
        operation=operation,
        error=str(error),
        **kwargs,
    )


logger = _logger
