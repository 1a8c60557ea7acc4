"""In-memory implementation of the StudentStore interface."""

from __future__ import annotations

import threading

from roster.student_store.exceptions import EmailExistsError, StudentNotFoundError
from roster.student_store.models import Student


def _copy(student: Student) -> Student:
    return Student(student.name, student.email, student.gender, id=student.id)


class InMemoryStudentStore:
    """In-memory StudentStore.

    This implementation is intended for testing and development purposes only.
    It does not persist data and is not suitable for production use.

    Records are stored and returned as copies, so changing a returned
    Student never changes the stored record.
    """

    def __init__(self) -> None:
        self._students: dict[int, Student] = {}  # id: student
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> list[Student]:
        with self._lock:
            return [_copy(self._students[key]) for key in sorted(self._students)]

    def save(self, student: Student) -> Student:
        with self._lock:
            for existing in self._students.values():
                if existing.email == student.email and existing.id != student.id:
                    raise EmailExistsError(student.email)

            if student.id is None:
                student.id = self._next_id
            self._next_id = max(self._next_id, student.id + 1)
            self._students[student.id] = _copy(student)
            return _copy(student)

    def exists_email(self, email: str) -> bool:
        with self._lock:
            return any(student.email == email for student in self._students.values())

    def delete_all(self) -> None:
        with self._lock:
            self._students.clear()

    def get(self, student_id: int) -> Student:
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                raise StudentNotFoundError(student_id)
            return _copy(student)

    def count(self) -> int:
        with self._lock:
            return len(self._students)
