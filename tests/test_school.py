import pytest

from skischool.models import Language, Level, Skill
from skischool.school import CourseError, SkiSchool, StudentFileError


def _write(tmp_path, lines):
    path = tmp_path / "students.txt"
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


def _teacher_id(school, last_name):
    return next(t.id for t in school.teachers if t.last_name == last_name)


def test_default_courses():
    school = SkiSchool()
    courses = school.courses
    assert sorted(courses) == [1, 2, 3, 4]
    assert [courses[i].teacher.last_name for i in sorted(courses)] == [
        "Neureuther",
        "Goggia",
        "Deerksen",
        "Odermatt",
    ]
    assert courses[3].level is Level.INTERMEDIATE
    assert all(c.skill is Skill.SKI for c in courses.values())


def test_read_student_file(tmp_path):
    path = _write(tmp_path, ["Huber|Anna|0|31|0", "Rossi|Luca|2|4|1"])
    school = SkiSchool()
    assert school.read_student_file(path) == 2
    first, second = school.students
    assert (first.last_name, first.first_name) == ("Huber", "Anna")
    assert first.level is Level.BEGINNER
    assert first.requested_skill is Skill.SKI
    assert first.languages == {Language.GERMAN, Language.ENGLISH}
    assert second.level is Level.ADVANCED
    assert second.requested_skill is Skill.SNOWBOARD


def test_read_replaces_previous_students(tmp_path):
    school = SkiSchool()
    school.read_student_file(_write(tmp_path, ["A|B|0|1|0", "C|D|0|1|0"]))
    school.read_student_file(_write(tmp_path, ["E|F|1|1|0"]))
    assert [s.last_name for s in school.students] == ["E"]


def test_missing_field_raises_with_line(tmp_path):
    path = _write(tmp_path, ["Huber|Anna|0|31|0", "Rossi|Luca|2|4"])
    school = SkiSchool()
    with pytest.raises(StudentFileError) as info:
        school.read_student_file(path)
    assert info.value.line == 2
    assert school.students == []


def test_non_numeric_level_raises(tmp_path):
    path = _write(tmp_path, ["Huber|Anna|x|31|0"])
    school = SkiSchool()
    with pytest.raises(StudentFileError) as info:
        school.read_student_file(path)
    assert info.value.line == 1
    assert school.students == []


def test_missing_file_raises(tmp_path):
    school = SkiSchool()
    with pytest.raises(StudentFileError):
        school.read_student_file(tmp_path / "absent.txt")
    assert school.raw_student_list() == "Keine Schueler geladen."


def test_raw_student_list(tmp_path):
    school = SkiSchool()
    school.read_student_file(_write(tmp_path, ["Huber|Anna|3|1|0"]))
    text = school.raw_student_list()
    assert text.startswith("Eingelesene Schueler (noch nicht verteilt):\n")
    assert "Anzahl: 1\n" in text
    assert text.endswith("Huber, Anna (EXPERT)\n")


def test_distribute_fills_first_course_then_next(tmp_path):
    lines = [f"Name{i}|Vor|0|1|0" for i in range(9)]
    school = SkiSchool()
    school.read_student_file(_write(tmp_path, lines))
    assigned = school.distribute_students()
    courses = school.courses
    assert assigned == len(lines)
    assert len(courses[1].students) == courses[1].group_size
    assert len(courses[2].students) == len(lines) - courses[1].group_size
    assert school.waiting_list == []


def test_unmatched_students_go_to_waiting_list(tmp_path):
    school = SkiSchool()
    school.read_student_file(_write(tmp_path, ["Zeta|Zoe|0|1|1", "Alpha|Al|3|1|0", "Mid|Mo|1|1|0"]))
    assigned = school.distribute_students()
    assert assigned == 1
    assert {s.last_name for s in school.waiting_list} == {"Zeta", "Alpha"}
    assert [s.last_name for s in school.courses[3].students] == ["Mid"]


def test_distribute_twice_does_not_duplicate(tmp_path):
    school = SkiSchool()
    school.read_student_file(_write(tmp_path, ["A|B|0|1|0"]))
    school.distribute_students()
    school.distribute_students()
    total = sum(len(c.students) for c in school.courses.values())
    assert total == len(school.students)


def test_show_all_courses_empty():
    html = SkiSchool().show_all_courses()
    assert html.startswith("<div style='font-size: 13pt; font-family: Arial, sans-serif;'>")
    assert html.endswith("</div>")
    assert html.count("<li><i>Keine Schüler zugeordnet</i></li>") == 4
    assert "Aktuell befinden sich keine Schüler auf der Warteliste." in html
    assert "<b>Lehrer:</b> Felix Neureuther<br>" in html
    assert "<i>ADVANCED SKI</i><br>" in html
    positions = [html.index(f"Kurs {i}</h2>") for i in (1, 2, 3, 4)]
    assert positions == sorted(positions)


def test_show_all_courses_sorts_names(tmp_path):
    school = SkiSchool()
    school.read_student_file(
        _write(
            tmp_path,
            ["Weber|Tom|0|1|0", "Adler|Ben|0|1|0", "Adler|Amy|0|1|0", "Zeta|Zoe|0|1|1", "Alpha|Al|0|1|1"],
        )
    )
    school.distribute_students()
    html = school.show_all_courses()
    assert html.index("<li>Adler, Amy</li>") < html.index("<li>Adler, Ben</li>")
    assert html.index("<li>Adler, Ben</li>") < html.index("<li>Weber, Tom</li>")
    assert html.index("<li>Alpha, Al</li>") < html.index("<li>Zeta, Zoe</li>")
    assert "keinem Kurs zugewiesen werden:</p>" in html
    assert [s.last_name for s in school.waiting_list] == ["Alpha", "Zeta"]


def test_create_course_success():
    school = SkiSchool()
    teacher_id = _teacher_id(school, "Shiffrin")
    course = school.create_course(7, Skill.SNOWBOARD, Level.EXPERT, teacher_id)
    assert school.courses[7] is course
    assert course.teacher.last_name == "Shiffrin"
    assert course.level is Level.EXPERT


def test_create_course_accepts_ints_and_replaces():
    school = SkiSchool()
    teacher_id = _teacher_id(school, "Strasser")
    course = school.create_course(1, 0, 1, teacher_id)
    assert school.courses[1] is course
    assert course.skill is Skill.SKI


def test_create_course_rejects_both_type():
    school = SkiSchool()
    with pytest.raises(CourseError):
        school.create_course(9, Skill.BOTH, Level.BEGINNER, _teacher_id(school, "Shiffrin"))


def test_create_course_rejects_invalid_level():
    school = SkiSchool()
    with pytest.raises(CourseError):
        school.create_course(9, Skill.SKI, 4, _teacher_id(school, "Shiffrin"))


def test_create_course_rejects_unknown_teacher():
    school = SkiSchool()
    unknown = max(t.id for t in school.teachers) + 1
    with pytest.raises(CourseError):
        school.create_course(9, Skill.SKI, Level.BEGINNER, unknown)


def test_create_course_rejects_inexperienced_teacher():
    school = SkiSchool()
    with pytest.raises(CourseError):
        school.create_course(9, Skill.SKI, Level.ADVANCED, _teacher_id(school, "Strasser"))
    assert 9 not in school.courses


@pytest.mark.parametrize(
    "skill, teacher",
    [(Skill.SKI, "Deerksen"), (Skill.SNOWBOARD, "Neureuther")],
)
def test_create_course_rejects_wrong_sport(skill, teacher):
    school = SkiSchool()
    with pytest.raises(CourseError):
        school.create_course(9, skill, Level.BEGINNER, _teacher_id(school, teacher))