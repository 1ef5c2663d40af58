"""Translation of database driver errors into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from huddle.domain.error import StoreUnavailableError, ValidationError


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Map SQLAlchemy failures raised inside the block to domain errors.

    Constraint violations become ValidationError; connection, pool and
    timeout failures become StoreUnavailableError. Anything else propagates
    unchanged.

    Args:
        operation: Name of the repository operation, for logs and messages
    """
    try:
        yield
    except IntegrityError as e:
        logfire.warn("Database constraint violated", operation=operation, error=str(e))
        raise ValidationError(f"Invalid comment record: {e.orig}") from e
    except (
        OperationalError,
        InterfaceError,
        PoolTimeoutError,
        TimeoutError,
        OSError,
    ) as e:
        logfire.error("Database unavailable", operation=operation, error=str(e))
        raise StoreUnavailableError("database", operation, type(e).__name__) from e
    except DBAPIError as e:
        if not e.connection_invalidated:
            raise
        logfire.error("Database connection lost", operation=operation, error=str(e))
        raise StoreUnavailableError("database", operation, "connection lost") from e
