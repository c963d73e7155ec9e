"""Course registry with JSON persistence."""

from __future__ import annotations

import copy
import json
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .models import Course, Faculty
from .topics import TopicManager

DEFAULT_STORE = "courses.json"

_WHITESPACE = re.compile(r"\s*")


class CourseNotFoundError(LookupError):
    """Raised when no course matches the requested name."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Course not found: {key!r}")
        self.key = key


def _read_records(path: str | Path) -> Iterator[dict[str, Any]]:
    """Yield course records from a file of one or more JSON documents."""
    text = Path(path).read_text(encoding="utf-8")
    decoder = json.JSONDecoder()
    pos = _WHITESPACE.match(text, 0).end()
    if pos >= len(text):
        raise ValueError(f"{path}: no course data")
    while pos < len(text):
        value, pos = decoder.raw_decode(text, pos)
        for record in value if isinstance(value, list) else [value]:
            if not isinstance(record, dict):
                raise ValueError(f"{path}: malformed course record {record!r}")
            yield record
        pos = _WHITESPACE.match(text, pos).end()


class CourseManager:
    """Keeps the courses of the system and a running course count."""

    def __init__(self) -> None:
        self._courses: list[Course] = []
        self._total = 0
        self.topic_manager = TopicManager()

    @property
    def courses(self) -> tuple[Course, ...]:
        return tuple(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def _index(self, key: int | str) -> int | None:
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise TypeError(f"course key must be an id or a name, not {key!r}")
        attr = "id" if isinstance(key, int) else "name"
        return next(
            (i for i, c in enumerate(self._courses) if getattr(c, attr) == key),
            None,
        )

    def add(self, course: Course) -> Course:
        """Store an independent copy of course and return it."""
        stored = copy.deepcopy(course)
        self._courses.append(stored)
        self._total += 1
        return stored

    def remove(self, key: int | str) -> bool:
        """Remove the first course with this id (int) or name (str).

        A failed removal lowers the running count by one.
        """
        index = self._index(key)
        if index is None:
            self._total -= 1
            return False
        del self._courses[index]
        return True

    def find(self, key: int | str) -> Course | None:
        """Return the first course with this id (int) or name (str)."""
        index = self._index(key)
        return None if index is None else self._courses[index]

    def render_all(self) -> str:
        if not self._courses:
            return "No courses available.\n"
        return "".join(c.render() for c in self._courses)

    def edit(self, name: str, new_id: int, new_name: str, faculty: Faculty | str) -> bool:
        """Replace id, name and faculty of the first course called name."""
        course = next((c for c in self._courses if c.name == name), None)
        if course is None:
            return False
        course.id = new_id
        course.name = new_name
        course.faculty = faculty if isinstance(faculty, Faculty) else Faculty(faculty)
        return True

    def topic_stats(self) -> dict[str, int]:
        """Map course names, sorted, to their number of topics."""
        counts = {c.name: len(c.topics) for c in self._courses}
        return dict(sorted(counts.items()))

    def render_topic_stats(self) -> str:
        lines = ["[-- Course Topic Stats --]\n"]
        lines.extend(
            f"Course: {name} has {count} topics.\n"
            for name, count in self.topic_stats().items()
        )
        lines.append("--------------------------\n")
        return "".join(lines)

    def save_course(self, name: str, path: str | Path = DEFAULT_STORE) -> dict[str, Any]:
        """Append the named course's record to the store and return the record."""
        course = next((c for c in self._courses if c.name == name), None)
        if course is None:
            raise CourseNotFoundError(name)
        record = {
            "course_name": course.name,
            "course_id": course.id,
            "Faculty": course.faculty.name,
        }
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, indent=4, sort_keys=True) + "\n")
        return record

    def load_course(self, name: str, path: str | Path = DEFAULT_STORE) -> Course:
        """Replace all courses with the named course read from the store."""
        records = list(_read_records(path))
        self._courses.clear()
        for record in records:
            if record.get("course_name") == name:
                course = Course(int(record["course_id"]), name, Faculty(str(record["Faculty"])))
                self._courses.append(course)
                return course
        raise CourseNotFoundError(name)

    def course_count(self) -> int:
        return self._total