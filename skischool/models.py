"""Domain types of the ski school: levels, skills, students, teachers and courses."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional

GROUP_SIZE = 8


class Level(IntEnum):
    BEGINNER = 0
    INTERMEDIATE = 1
    ADVANCED = 2
    EXPERT = 3


class Seniority(IntEnum):
    GRADUATE = 0
    SENIOR = 1


class Skill(IntEnum):
    SKI = 0
    SNOWBOARD = 1
    BOTH = 2


class Language(IntEnum):
    DUTCH = 0
    ENGLISH = 1
    FRENCH = 2
    GERMAN = 3
    ITALIAN = 4
    POLISH = 5


def level_text(level) -> str:
    """Return the display name of a level, or ``UNKNOWN`` for an invalid one."""
    try:
        return Level(level).name
    except ValueError:
        return "UNKNOWN"


def skill_text(skill) -> str:
    """Return the display name of a skill, or ``UNKNOWN`` for an invalid one."""
    try:
        return Skill(skill).name
    except ValueError:
        return "UNKNOWN"


_student_ids = itertools.count(1)
_teacher_ids = itertools.count(0)


@dataclass(eq=False)
class Student:
    """A student who wants to join a course; ids are assigned from 1 upwards."""

    last_name: str
    first_name: str
    level: Level
    requested_skill: Skill
    languages: frozenset = frozenset()
    id: int = field(init=False, default_factory=lambda: next(_student_ids))

    def __post_init__(self) -> None:
        self.languages = frozenset(self.languages)


@dataclass(eq=False)
class Teacher:
    """A ski or snowboard teacher; ids are assigned from 0 upwards."""

    last_name: str
    first_name: str
    seniority: Seniority
    languages: frozenset
    skill: Skill
    id: int = field(init=False, default_factory=lambda: next(_teacher_ids))

    def __post_init__(self) -> None:
        self.languages = frozenset(self.languages)


@dataclass(eq=False)
class Course:
    """A course of one level and skill, led by a teacher."""

    level: Level
    skill: Skill
    teacher: Optional[Teacher]
    _students: list = field(default_factory=list, init=False, repr=False)

    @property
    def group_size(self) -> int:
        return GROUP_SIZE

    @property
    def students(self) -> list:
        return list(self._students)

    @property
    def is_full(self) -> bool:
        return len(self._students) >= self.group_size

    def clear_students(self) -> None:
        self._students.clear()

    def add_student(self, student: Optional[Student]) -> None:
        """Enrol a student; ``None`` is ignored."""
        if student is not None:
            self._students.append(student)

    def add_students(self, students: Iterable[Student]) -> None:
        for student in students:
            self.add_student(student)