"""Student Store - Persistent storage for student records."""

from roster.student_store.exceptions import (
    EmailExistsError,
    StorageError,
    StudentNotFoundError,
    StudentStoreError,
)
from roster.student_store.memory import InMemoryStudentStore
from roster.student_store.models import Gender, Student
from roster.student_store.store import SqlStudentStore, StudentStore

__all__ = [
    "EmailExistsError",
    "Gender",
    "InMemoryStudentStore",
    "SqlStudentStore",
    "StorageError",
    "Student",
    "StudentNotFoundError",
    "StudentStore",
    "StudentStoreError",
]
