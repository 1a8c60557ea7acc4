"""StudentStore - Storage contract and SQL-backed implementation."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roster.logging import get_logger, mask_email
from roster.student_store.database import Database
from roster.student_store.exceptions import (
    EmailExistsError,
    StorageError,
    StudentNotFoundError,
)
from roster.student_store.models import Student

logger = get_logger(__name__)


class StudentStore(Protocol):
    """Interface for Student persistence.

    Implementations own the durable record set and must enforce email
    uniqueness on save, raising EmailExistsError on conflict.
    """

    def find_all(self) -> list[Student]:
        """Return every stored student."""
        ...

    def save(self, student: Student) -> Student:
        """Persist a student, assigning an ID if it has none."""
        ...

    def exists_email(self, email: str) -> bool:
        """Return True if a stored student has exactly this email."""
        ...

    def delete_all(self) -> None:
        """Remove every stored student."""
        ...

    def get(self, student_id: int) -> Student:
        """Return the student with the given ID."""
        ...

    def count(self) -> int:
        """Return the number of stored students."""
        ...


class SqlStudentStore:
    """SQLite-backed StudentStore.

    Each operation runs in its own session. The email column carries a
    UNIQUE constraint, so concurrent writers on a file database cannot
    store duplicates. A ":memory:" store shares one connection across
    threads and must only be used from a single thread.
    """

    def __init__(self, db_path: str = "roster.db") -> None:
        """Initialize the store, creating tables if they don't exist.

        Args:
            db_path: Path to SQLite database file

        Raises:
            StorageError: If the tables cannot be created
        """
        self._db = Database(db_path)
        try:
            self._db.create_tables()
        except SQLAlchemyError as e:
            self._db.close()
            raise StorageError(f"Cannot initialize student storage: {e}") from e

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._db.get_session()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Storage operation failed: {e}") from e
        finally:
            session.close()

    def find_all(self) -> list[Student]:
        """List all students.

        Returns:
            List of all students, ordered by ID
        """
        with self._session() as session:
            stmt = select(Student).order_by(Student.id)
            return list(session.execute(stmt).scalars().all())

    def save(self, student: Student) -> Student:
        """Persist a student.

        Transient students are inserted and receive a generated ID. Students
        that already carry an ID are written back over the stored record.

        Args:
            student: The student to persist

        Returns:
            The persisted Student

        Raises:
            EmailExistsError: If another student already has this email
            StorageError: If the database operation fails
        """
        with self._session() as session:
            try:
                if student.id is None:
                    session.add(student)
                    persisted = student
                else:
                    persisted = session.merge(student)
                session.commit()
            except IntegrityError as e:
                session.rollback()
                if "students.email" in str(e):
                    raise EmailExistsError(student.email) from e
                raise
            session.refresh(persisted)
            logger.debug("Saved student %s (%s)", persisted.id, mask_email(persisted.email))
            return persisted

    def exists_email(self, email: str) -> bool:
        """Check whether a student with this exact email is stored.

        Args:
            email: Email to look up (exact match)

        Returns:
            True if a student with the email exists
        """
        with self._session() as session:
            stmt = select(exists().where(Student.email == email))
            return bool(session.scalar(stmt))

    def delete_all(self) -> None:
        """Delete every student."""
        with self._session() as session:
            result = session.execute(delete(Student))
            session.commit()
            logger.info("Deleted %d students", result.rowcount)

    def get(self, student_id: int) -> Student:
        """Get student by ID.

        Args:
            student_id: The student's unique ID

        Returns:
            The Student object

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        with self._session() as session:
            student = session.get(Student, student_id)
            if student is None:
                raise StudentNotFoundError(student_id)
            return student

    def count(self) -> int:
        """Count stored students."""
        with self._session() as session:
            return session.scalar(select(func.count()).select_from(Student)) or 0
