"""The ski school: loading students, creating courses and assigning students."""

from __future__ import annotations

import re
from typing import Optional

from .models import (
    Course,
    Language,
    Level,
    Seniority,
    Skill,
    Student,
    Teacher,
    level_text,
    skill_text,
)

_DEFAULT_TEACHERS = (
    ("Neureuther", "Felix", Seniority.SENIOR, {Language.GERMAN, Language.ENGLISH}, Skill.SKI),
    ("Goggia", "Sofia", Seniority.SENIOR, {Language.ITALIAN, Language.ENGLISH}, Skill.SKI),
    ("Deerksen", "Geertje", Seniority.GRADUATE, {Language.DUTCH, Language.ENGLISH}, Skill.SNOWBOARD),
    (
        "Odermatt",
        "Marco",
        Seniority.GRADUATE,
        {Language.GERMAN, Language.ENGLISH, Language.FRENCH},
        Skill.BOTH,
    ),
    ("Shiffrin", "Mikaela", Seniority.SENIOR, {Language.ENGLISH}, Skill.BOTH),
    ("Strasser", "Linus", Seniority.GRADUATE, {Language.GERMAN, Language.ENGLISH}, Skill.SKI),
)

_FIELD_COUNT = 5
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class StudentFileError(Exception):
    """A student file could not be read; ``line`` names the faulty line if known."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line


class CourseError(ValueError):
    """A course could not be created with the given settings."""


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number {text!r}")
    return int(match.group(1))


def _name_key(student: Student) -> tuple:
    return (student.last_name, student.first_name)


class SkiSchool:
    """Holds teachers, courses, students and the waiting list."""

    def __init__(self) -> None:
        self._teachers = [Teacher(*spec) for spec in _DEFAULT_TEACHERS]
        self._courses: dict = {}
        self._students: list = []
        self._waiting_list: list = []
        if self._teachers:
            self._courses[1] = Course(Level.BEGINNER, Skill.SKI, self._teachers[0])
            self._courses[2] = Course(Level.BEGINNER, Skill.SKI, self._teachers[1])
            self._courses[3] = Course(Level.INTERMEDIATE, Skill.SKI, self._teachers[2])
            self._courses[4] = Course(Level.ADVANCED, Skill.SKI, self._teachers[3])

    @property
    def students(self) -> list:
        return list(self._students)

    @property
    def teachers(self) -> list:
        return list(self._teachers)

    @property
    def courses(self) -> dict:
        return dict(self._courses)

    @property
    def waiting_list(self) -> list:
        return list(self._waiting_list)

    def read_student_file(self, path) -> int:
        """Replace the students with those read from ``path``.

        Each line reads ``last|first|level|languages|skill``, where languages is
        a run of language digits. On any error no students remain loaded and
        :class:`StudentFileError` is raised. Returns the number of students read.
        """
        self._students = []
        loaded = []
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                for number, raw in enumerate(handle, start=1):
                    loaded.append(self._parse_line(raw.rstrip("\n"), number))
        except OSError as exc:
            raise StudentFileError(f"file not found: {path}") from exc
        self._students = loaded
        return len(loaded)

    @staticmethod
    def _parse_line(line: str, number: int) -> Student:
        fields = (line.split("|") + [""] * _FIELD_COUNT)[:_FIELD_COUNT]
        if not all(fields):
            raise StudentFileError(f"error in line {number}", number)
        last_name, first_name, level_field, language_field, skill_field = fields
        try:
            level = Level(_parse_int(level_field))
            skill = Skill(_parse_int(skill_field))
            languages = frozenset(Language(int(char)) for char in language_field)
        except ValueError as exc:
            raise StudentFileError(f"data error: {exc} in line {number}", number) from exc
        return Student(last_name, first_name, level, skill, languages)

    def create_course(self, course_id, skill, level, teacher_id) -> Course:
        """Create (or replace) the course ``course_id`` after checking the teacher."""
        try:
            skill = Skill(skill)
        except ValueError as exc:
            raise CourseError(f"invalid course type: {skill!r}") from exc
        if skill not in (Skill.SKI, Skill.SNOWBOARD):
            raise CourseError("course type must be SKI or SNOWBOARD")
        try:
            level = Level(level)
        except ValueError as exc:
            raise CourseError(f"invalid level: {level!r}") from exc

        teacher = next((t for t in self._teachers if t.id == teacher_id), None)
        if teacher is None:
            raise CourseError(f"no teacher with id {teacher_id}")
        if level >= Level.ADVANCED and teacher.seniority != Seniority.SENIOR:
            raise CourseError("teacher lacks experience for this level")
        if (skill is Skill.SKI and teacher.skill is Skill.SNOWBOARD) or (
            skill is Skill.SNOWBOARD and teacher.skill is Skill.SKI
        ):
            raise CourseError("teacher does not teach this sport")

        course = Course(level, skill, teacher)
        self._courses[course_id] = course
        return course

    def distribute_students(self) -> int:
        """Assign each student to the first matching course with room.

        Courses are tried in id order; students who fit nowhere go to the
        waiting list. Returns the number of students assigned.
        """
        ordered = [course for _, course in sorted(self._courses.items())]
        for course in ordered:
            course.clear_students()
        self._waiting_list = []

        assigned = 0
        for student in self._students:
            target = next(
                (
                    course
                    for course in ordered
                    if course.level == student.level
                    and course.skill == student.requested_skill
                    and not course.is_full
                ),
                None,
            )
            if target is None:
                self._waiting_list.append(student)
            else:
                target.add_student(student)
                assigned += 1
        return assigned

    def show_all_courses(self) -> str:
        """Return an HTML report of all courses and the waiting list."""
        parts = ["<div style='font-size: 13pt; font-family: Arial, sans-serif;'>"]

        for course_id, course in sorted(self._courses.items()):
            teacher = course.teacher
            if course is None or teacher is None:
                continue
            parts.append(
                f"<h2 style='color: #2E86C1; margin-bottom: 5px;'>Kurs {course_id}</h2>"
            )
            parts.append(f"<b>Lehrer:</b> {teacher.first_name} {teacher.last_name}<br>")
            parts.append(f"<i>{level_text(course.level)} {skill_text(course.skill)}</i><br>")
            parts.append("<p style='margin-bottom: 2px;'><b>Eingeschriebene Schüler:</b></p>")
            parts.append("<ol style='margin-top: 0px;'>")
            enrolled = sorted(course.students, key=_name_key)
            if not enrolled:
                parts.append("<li><i>Keine Schüler zugeordnet</i></li>")
            else:
                parts.extend(f"<li>{s.last_name}, {s.first_name}</li>" for s in enrolled)
            parts.append("</ol>")
            parts.append("<hr style='border: 0; border-top: 1px solid #ccc;'>")

        parts.append("<br><h2 style='color: #E74C3C;'>⏳ Warteliste</h2>")
        if not self._waiting_list:
            parts.append(
                "<p><i>Aktuell befinden sich keine Schüler auf der Warteliste.</i></p>"
            )
        else:
            parts.append(
                "<p>Diese Schüler konnten aufgrund fehlender Kapazitäten "
                "keinem Kurs zugewiesen werden:</p>"
            )
            parts.append("<ol style='margin-left: 50px; color: #555;'>")
            self._waiting_list.sort(key=_name_key)
            parts.extend(
                f"<li>{s.last_name}, {s.first_name}</li>" for s in self._waiting_list
            )
            parts.append("</ol>")

        parts.append("</div>")
        return "".join(parts)

    def raw_student_list(self) -> str:
        """Return a plain-text list of the loaded students."""
        if not self._students:
            return "Keine Schueler geladen."
        lines = [
            "Eingelesene Schueler (noch nicht verteilt):\n",
            f"Anzahl: {len(self._students)}\n",
            "------------------------------------------\n",
        ]
        lines.extend(
            f"{s.last_name}, {s.first_name} ({level_text(s.level)})\n" for s in self._students
        )
        return "".join(lines)