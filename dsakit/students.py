"""Student records kept in registration order and looked up by number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Student:
    """One student's record."""

    regno: int
    name: str
    cgpa: float
    branch: str


def format_student(student: Student) -> str:
    """Render a student as the four labelled lines of a record."""
    return (
        f"Registration no.: {student.regno}\n"
        f"Name: {student.name}\n"
        f"CGPA: {student.cgpa:f}\n"
        f"Branch: {student.branch}"
    )


class StudentList:
    """An ordered collection of students."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students: list[Student] = list(students)

    def find(self, regno: int) -> Optional[Student]:
        """Return the first student with ``regno``, or None if there is none."""
        return next((s for s in self._students if s.regno == regno), None)

    def sort_by_regno(self) -> None:
        """Order the students by ascending registration number, stably."""
        self._students.sort(key=lambda student: student.regno)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)