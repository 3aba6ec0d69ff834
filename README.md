# skischool

A small management tool for a ski school. It reads a list of students from a
text file, assigns every student to a course that matches their level and
chosen sport, puts those left over on a waiting list, and prints an overview
of all courses.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The student file

Each line describes one student. It has five fields separated by `|`:

```
lastname|firstname|level|languages|skill
```

- `level`: `0` beginner, `1` intermediate, `2` advanced, `3` expert
- `languages`: one digit per spoken language, written one after another:
  `0` Dutch, `1` English, `2` French, `3` German, `4` Italian, `5` Polish
- `skill`: `0` ski, `1` snowboard, `2` both

Example:

```
Muster|Anna|0|31|0
Beispiel|Ben|2|1|0
```

Each field must be present. If a line has an empty field or a number
that cannot be read, the file is rejected and no students are kept.

## Command line

```
skischool --help
```

shows the options the command accepts for loading a student file,
distributing the students and printing the course overview.

## Library use

```python
from skischool.school import SkiSchool

school = SkiSchool()
school.read_student_file("students.txt")
print(school.raw_student_list())

school.distribute_students()
html = school.show_all_courses()
```

A new school starts with six teachers and four courses (IDs 1 to 4). Further
courses can be added with
`create_course(course_id, skill, level, teacher_id)`. The teacher must exist,
must be a senior for advanced or expert courses, and must teach the course's
sport. If these conditions are not met, `CourseError` is raised.

Every course holds at most eight students. Students are placed into the
first course, in order of course ID, that has the same level and sport and
still has a free place. Students that do not fit anywhere go on the waiting
list. `show_all_courses()` lists the courses by ID, with their students and
the waiting list sorted by last name, then first name.

The building blocks live in `skischool.models`: the enums `Level`,
`Seniority`, `Skill` and `Language`, and the classes `Student`, `Teacher` and
`Course`. The functions `level_text` and `skill_text` give the display names
of levels and sports.