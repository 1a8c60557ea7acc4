"""Student Service package - Business rules over the Student Store."""

from roster.student_service.exceptions import (
    BadRequestError,
    DuplicateEmailError,
    StudentServiceError,
)
from roster.student_service.service import StudentService

__all__ = [
    "BadRequestError",
    "DuplicateEmailError",
    "StudentService",
    "StudentServiceError",
]
