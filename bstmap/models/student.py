"""
Student record used as the demonstration payload.
"""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(eq=False)
class Student:
    """
    A student enrolled in a class.

    Students are ordered, compared and hashed by name.

    Attributes:
        registration: Registration (enrollment) number.
        name: Full name, used as the ordering key.
        grade: Final grade.
    """

    registration: int
    name: str
    grade: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: "Student") -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Registration: {self.registration}\n"
            f"Grade: {self.grade}"
        )
