"""
Storage adapter over a SQLAlchemy session.

The repository and the attempt recorder talk to the store only through this
class. Writes that must land together go inside ``transaction()``.
"""
import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class StorageAdapter:
    """Parameterized query execution with an atomic transaction scope."""

    def __init__(self, db: Session):
        self.db = db
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator["StorageAdapter"]:
        """
        Run the enclosed statements as one atomic unit.

        Commits on normal exit and rolls back on any exception. Nested scopes
        join the outermost one. SQLAlchemy errors are re-raised as
        StorageError; core errors (validation, not found...) propagate as-is.
        """
        if self._depth > 0:
            self._depth += 1
            try:
                yield self
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            yield self
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rolled back after storage failure: {e}")
            raise StorageError("The operation could not be completed") from e
        except Exception:
            self.db.rollback()
            raise
        finally:
            self._depth = 0

    def query_one(self, statement) -> Optional[Any]:
        """Return the first entity produced by a select, or None."""
        try:
            return self.db.scalars(statement).first()
        except SQLAlchemyError as e:
            self._fail("query_one", e)

    def query_many(self, statement) -> List[Any]:
        """Return every entity produced by a select."""
        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            self._fail("query_many", e)

    def scalar(self, statement) -> Any:
        """Return a single scalar value, e.g. a count."""
        try:
            return self.db.scalar(statement)
        except SQLAlchemyError as e:
            self._fail("scalar", e)

    def execute(self, statement):
        """Execute a DML statement (update/delete) and return its result."""
        try:
            return self.db.execute(statement)
        except SQLAlchemyError as e:
            self._fail("execute", e)

    def add(self, instance: Any) -> Any:
        """Stage a new row and flush it so generated keys are populated."""
        try:
            self.db.add(instance)
            self.db.flush()
            return instance
        except SQLAlchemyError as e:
            self._fail("add", e)

    def _fail(self, operation: str, error: SQLAlchemyError) -> None:
        # Inside a transaction the scope owns rollback and logging.
        if self._depth > 0:
            raise error
        self.db.rollback()
        logger.error(f"Storage {operation} failed: {error}")
        raise StorageError("The operation could not be completed") from error
