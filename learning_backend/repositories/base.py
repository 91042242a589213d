import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from learning_backend import errors

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER column can hold.
MAX_STORED_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    return 1 <= value <= MAX_STORED_ID


class SqlRepository:
    """Shared session handling for the SQLAlchemy-backed stores."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, conflict_message: str | None = None) -> None:
        # Uniqueness is left to the database; a violated constraint surfaces
        # here as IntegrityError and is reported as a conflict.
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if conflict_message is None:
                logger.exception('Unexpected integrity error')
                raise errors.Internal() from exc
            raise errors.Conflict(conflict_message) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception('Database write failed')
            raise errors.Internal() from exc
