"""StudentService - Email uniqueness guard in front of the Student Store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roster.logging import get_logger, mask_email
from roster.student_service.exceptions import DuplicateEmailError
from roster.student_store import EmailExistsError

if TYPE_CHECKING:
    from roster.student_store import Student, StudentStore

logger = get_logger(__name__)


class StudentService:
    """Validates student writes and delegates storage to a StudentStore.

    The service holds no state besides its store. Email uniqueness is
    checked before every write; the store's own uniqueness constraint
    covers writers that race past the check.
    """

    def __init__(self, student_store: StudentStore) -> None:
        """Initialize the service.

        Args:
            student_store: Store that owns the student records.
        """
        self.student_store = student_store

    def get_all_students(self) -> list[Student]:
        """Return all students exactly as the store lists them."""
        return self.student_store.find_all()

    def get_student(self, student_id: int) -> Student:
        """Return one student.

        Raises:
            StudentNotFoundError: If no student has this ID.
        """
        return self.student_store.get(student_id)

    def add_student(self, student: Student) -> Student:
        """Add a new student.

        Args:
            student: Transient student to persist. Passed to the store unchanged.

        Returns:
            The persisted student as returned by the store.

        Raises:
            DuplicateEmailError: If a student with the same email already exists.
        """
        if self.student_store.exists_email(student.email):
            raise DuplicateEmailError(student.email)

        try:
            saved = self.student_store.save(student)
        except EmailExistsError as e:
            raise DuplicateEmailError(student.email) from e

        logger.info("Student %s added (%s)", saved.id, mask_email(student.email))
        return saved
