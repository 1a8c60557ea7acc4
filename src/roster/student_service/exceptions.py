"""Exceptions for the Student Service module."""


class StudentServiceError(Exception):
    """Base exception for student service errors."""

    pass


class BadRequestError(StudentServiceError):
    """The request cannot be fulfilled as given."""

    pass


class DuplicateEmailError(BadRequestError):
    """Another student already uses this email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email {email} taken")
