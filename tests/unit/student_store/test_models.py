"""Unit tests for Student Store models."""

import pytest

from roster.student_store.models import Gender, Student


class TestGenderEnum:
    """Tests for Gender enum."""

    def test_gender_enum_values(self) -> None:
        """Both members exist with upper-case values."""
        assert Gender.MALE.value == "MALE"
        assert Gender.FEMALE.value == "FEMALE"

    def test_gender_enum_is_closed(self) -> None:
        """Exactly 2 members exist."""
        assert len(Gender) == 2

    def test_unknown_gender_rejected(self) -> None:
        with pytest.raises(ValueError):
            Gender("OTHER")


class TestStudentModel:
    """Tests for Student model."""

    def test_student_is_transient_on_creation(self, jamila: Student) -> None:
        """No ID until a store saves the student."""
        assert jamila.id is None
        assert not jamila.is_persisted

    def test_student_fields(self, jamila: Student) -> None:
        assert jamila.name == "Jamila"
        assert jamila.email == "jamila@gmail.com"
        assert jamila.gender is Gender.FEMALE

    def test_gender_coerced_from_string(self) -> None:
        student = Student("Alex", "alex@gmail.com", "MALE")
        assert student.gender is Gender.MALE

    def test_invalid_gender_raises(self) -> None:
        with pytest.raises(ValueError):
            Student("Alex", "alex@gmail.com", "UNKNOWN")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_raises(self, name: str) -> None:
        with pytest.raises(ValueError, match="name"):
            Student(name, "alex@gmail.com", Gender.MALE)

    def test_explicit_id(self) -> None:
        student = Student("Alex", "alex@gmail.com", Gender.MALE, id=7)
        assert student.id == 7
        assert student.is_persisted

    def test_student_repr(self, jamila: Student) -> None:
        assert repr(jamila) == "<Student(id=None, name='Jamila', email='jamila@gmail.com')>"
