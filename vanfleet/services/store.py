# vanfleet/services/store.py
"""
Translation of SQLAlchemy failures into the application error taxonomy.
Every service function runs its store access inside translate_store_errors()
so routers only ever see AppException subclasses.
"""

from contextlib import contextmanager
from typing import Callable

from sqlalchemy.exc import DisconnectionError, IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session
from vanfleet.exceptions import AppException, InternalError, StoreUnavailableError
from vanfleet.utils.logger import get_logger

logger = get_logger(__name__, "STORE")


@contextmanager
def translate_store_errors(db: Session, action: str, on_integrity_error: Callable[[], AppException] = None):
    """
    Roll back and re-raise store errors as application errors.
    on_integrity_error builds the error for constraint violations
    (conflict on natural keys, not-found on a dangling foreign key).
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        if on_integrity_error is None:
            logger.error(f"{action} violated a constraint: {e.orig}")
            raise InternalError(f"Failed to {action}") from e
        error = on_integrity_error()
        logger.warning(f"{action} rejected: {error.message}")
        raise error from e
    except (OperationalError, InterfaceError, DisconnectionError) as e:
        db.rollback()
        logger.error(f"{action}: database unreachable: {e}")
        raise StoreUnavailableError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{action} failed: {e}", exc_info=True)
        raise InternalError(f"Failed to {action}") from e
