"""Custom exceptions for Student Store."""


class StudentStoreError(Exception):
    """Base exception for Student Store errors."""


class StudentNotFoundError(StudentStoreError):
    """Student with given ID does not exist."""

    def __init__(self, student_id: int) -> None:
        self.student_id = student_id
        super().__init__(f"Student with id '{student_id}' not found")


class EmailExistsError(StudentStoreError):
    """A student with the given email is already stored."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Student with email '{email}' already exists")


class StorageError(StudentStoreError):
    """The underlying storage engine failed."""
