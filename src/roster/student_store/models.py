"""SQLAlchemy models for Student Store."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    validates,
)


class Gender(StrEnum):
    """Gender enum."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Student(Base):
    """Student model - one enrolled person.

    A Student built by the caller is transient (``id`` is None) until a
    store saves it and assigns the identifier.
    """

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, native_enum=False, length=16), nullable=False
    )

    def __init__(
        self,
        name: str,
        email: str,
        gender: Gender | str,
        id: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id  # type: ignore[assignment]
        self.name = name
        self.email = email
        self.gender = gender  # type: ignore[assignment]

    @validates("name")
    def _validate_name(self, _key: str, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Student name must not be empty")
        return value

    @validates("gender")
    def _validate_gender(self, _key: str, value: Gender | str) -> Gender:
        # Raises ValueError for anything outside the enum
        return Gender(value)

    @property
    def is_persisted(self) -> bool:
        """Whether a store has assigned this student an identifier."""
        return self.id is not None

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, name={self.name!r}, email={self.email!r})>"
