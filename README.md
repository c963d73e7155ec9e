# coursemgr

A small course management tool. It keeps a list of courses in memory. Each course has a
faculty member, topics, quizzes, assignments and final exams. The name, id and faculty of
a course can be saved to a JSON file and loaded back.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Interactive use

```
coursemgr
```

`python -m coursemgr.cli` does the same. The menu offers these choices:

```
1) Add Course
2) Remove Course
3) Show All Courses
4) Show a Course
5) Edit A Course
6) Save Course Details
7) Load Course Details
8) Check Course Count
9) Display Course-Topic stats
0) Exit
```

- **Add Course** asks for the course id, name and faculty, then for one or more topics,
  then for any number of quizzes, assignments and finals. Topics entered during a session
  are kept, so each new course gets every topic entered so far.
- **Remove Course** and **Show a Course** find a course by name or by id.
- **Edit A Course** replaces the id, name and faculty of a course found by name.
- **Save Course Details** appends the course's name, id and faculty to `courses.json` in
  the current directory.
- **Load Course Details** reads `courses.json`, throws away every course in memory and
  keeps only the named course. The file may hold one record, a list of records, or
  several records written one after another.
- **Check Course Count** shows a running count. It goes up with each course added and,
  unlike the list itself, goes down by one whenever a removal finds no course. A
  successful removal and a load leave it unchanged.
- **Display Course-Topic stats** lists each course, by name in sorted order, with its
  number of topics.

The menu ends at `0` or at the end of input.

## Library use

```python
from coursemgr.models import Course, Faculty, Topic, Quiz
from coursemgr.manager import CourseManager

manager = CourseManager()
course = Course(
    id=101,
    name="Algorithms",
    faculty=Faculty("Dr. Smith"),
    topics=[Topic(1, "Sorting", False, "Medium", "Comparison sorts")],
    quizzes=[Quiz("Quiz 1", 1, 10)],
)
manager.add(course)

print(manager.find("Algorithms").render())
print(manager.render_topic_stats())
manager.save_course("Algorithms", "courses.json")
```

- `coursemgr.models` holds `Faculty`, `Topic`, the assessment kinds `Quiz`,
  `Assignment` and `FinalExam` (all built on `Test`), and `Course`. Each has a `render()`
  method that returns its text description.
- `CourseManager.add` stores a copy of the course and returns that copy.
- `CourseManager.find` and `CourseManager.remove` take either a course id (`int`) or a
  course name (`str`); anything else raises `TypeError`.
- `CourseManager.edit(name, new_id, new_name, faculty)` accepts a `Faculty` or a plain
  name and returns whether a course was found.
- `CourseManager.topic_stats()` returns a dict of course name to topic count, sorted by
  name.
- `save_course(name, path)` and `load_course(name, path)` use `courses.json` when no
  path is given. When no course has the given name they raise `CourseNotFoundError`.
- `TopicManager` from `coursemgr.topics` keeps topics in order; its `find` and `remove`
  match by id or by title, and `remove` takes away every match.
- `coursemgr.cli.run(manager, ask, out)` drives the menu with any input function and
  output stream, which makes it usable in scripts and tests.

## What it does not do

Courses live only in memory while the program runs. Saving records just a course's name,
id and faculty: its topics, quizzes, assignments and finals are not written, so a loaded
course comes back without them. There is no way to save or load all courses at once.