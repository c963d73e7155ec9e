"""Interactive menu for managing courses."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from .manager import CourseManager, CourseNotFoundError
from .models import Assignment, Course, Faculty, FinalExam, Quiz, Test, Topic
from .topics import TopicManager

Ask = Callable[[str], str]

_MENU = (
    "[=== Course Management Menu ===]\n"
    "1) Add Course\n"
    "2) Remove Course\n"
    "3) Show All Courses\n"
    "4) Show a Course\n"
    "5) Edit A Course\n"
    "6) Save Course Details\n"
    "7) Load Course Details\n"
    "8) Check Course Count\n"
    "9) Display Course-Topic stats\n"
    "0) Exit\n"
    "=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-\n"
    "Select an option: "
)

_TEST_MENU = "\n--- Add Test ---\n1) Quiz\n2) Assignment\n3) Final\n0) Done\nChoose: "

_TEST_KINDS: dict[str, tuple[str, type[Test], str]] = {
    "1": ("Quiz Name: ", Quiz, "quizzes"),
    "2": ("Assignment Name: ", Assignment, "assignments"),
    "3": ("Final Name: ", FinalExam, "finals"),
}

_KEY_PROMPT = "Enter 1 to enter Course Name \nEnter 2 to enter Course ID \n"


def menu_text() -> str:
    """Return the main menu, ending with the selection prompt."""
    return _MENU


def _first_char(text: str) -> str:
    stripped = text.strip()
    return stripped[0] if stripped else ""


def _first_word(text: str) -> str:
    words = text.split()
    return words[0] if words else ""


def _ask_int(ask: Ask, prompt: str) -> int:
    return int(ask(prompt).strip())


def _ask_flag(ask: Ask, prompt: str) -> bool:
    answer = ask(prompt).strip()
    if answer not in ("0", "1"):
        raise ValueError(f"expected 1 or 0, got {answer!r}")
    return answer == "1"


def prompt_topic(ask: Ask) -> Topic:
    """Ask for the fields of one topic and return it."""
    topic_id = _ask_int(ask, "Enter Topic ID: ")
    title = ask("Title: ")
    completed = _ask_flag(ask, "Completed (1/0): ")
    difficulty = ask("Difficulty: ")
    description = ask("Description: ")
    return Topic(topic_id, title, completed, difficulty, description)


def prompt_course(ask: Ask, topic_manager: TopicManager) -> Course:
    """Ask for a course, its topics and its tests.

    Topics are added to topic_manager, and the course receives every topic
    that manager holds.
    """
    course_id = _ask_int(ask, "Enter Course ID: ")
    name = ask("Course Name: ")
    faculty = Faculty(ask("Faculty Name: "))

    while True:
        topic_manager.add(prompt_topic(ask))
        if _first_char(ask("Add another topic? (y/n): ")).lower() != "y":
            break

    course = Course(course_id, name, faculty, list(topic_manager))
    while (option := _first_char(ask(_TEST_MENU))) != "0":
        kind = _TEST_KINDS.get(option)
        if kind is None:
            continue
        name_prompt, test_cls, attr = kind
        test_name = ask(name_prompt)
        component = _ask_int(ask, "Component: ")
        marks = _ask_int(ask, "Marks: ")
        getattr(course, attr).append(test_cls(test_name, component, marks))
    return course


def _add(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    manager.add(prompt_course(ask, manager.topic_manager))


def _read_key(ask: Ask, out: TextIO) -> tuple[str, int | str] | None:
    option = _first_char(ask(_KEY_PROMPT))
    if option == "1":
        return "Name", _first_word(ask("Enter Course's Name: \n"))
    if option == "2":
        return "ID", _ask_int(ask, "Enter Course's ID: \n")
    out.write("Please Enter A Valid Option\n")
    return None


def _remove(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    selected = _read_key(ask, out)
    if selected is None:
        return
    label, key = selected
    if manager.remove(key):
        out.write(f"Course With the {label} {key} is removed.\n")
    else:
        out.write("Error\n")


def _show_all(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    out.write(manager.render_all())


def _show_one(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    selected = _read_key(ask, out)
    if selected is None:
        return
    course = manager.find(selected[1])
    out.write("Error\n" if course is None else course.render())


def _edit(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    name = _first_word(ask("Enter the Course Name to Edit\n"))
    if manager.find(name) is None:
        out.write("Sorry Course Not Found.\n")
        return
    out.write("[-- COURSE EDITOR --]\n")
    new_id = _ask_int(ask, "Enter Course ID\n")
    new_name = ask("Enter Course Name\n")
    faculty = Faculty(ask("Enter Course Faculty\n"))
    out.write("-----------------------\n")
    manager.edit(name, new_id, new_name, faculty)
    out.write(f"Course With the Name {name} is successfully Edited!\n")


def _save(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    name = _first_word(ask("Enter Course Name\n"))
    try:
        manager.save_course(name)
    except CourseNotFoundError:
        out.write("Error: Course not found in the system.\n")
    except OSError as exc:
        out.write(f"Error: Failed to open file for saving courses. ({exc})\n")
    else:
        out.write("Course Saved Successfully!\n")


def _load(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    name = _first_word(ask("Enter Course Name\n"))
    try:
        course = manager.load_course(name)
    except CourseNotFoundError:
        out.write("Load Error: Course not found\n")
    except OSError:
        out.write("Load Error: Could not open courses.json\n")
    except (ValueError, KeyError) as exc:
        out.write(f"Load Error: {exc}\n")
    else:
        out.write(
            "Course loaded:\n"
            f"Name: {course.name}\n"
            f"ID: {course.id}\n"
            f"Faculty: {course.faculty.name}\n"
        )


def _count(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    out.write(f"The total Count of Courses are: {manager.course_count()}\n")


def _stats(manager: CourseManager, ask: Ask, out: TextIO) -> None:
    out.write(manager.render_topic_stats())


_ACTIONS: dict[int, Callable[[CourseManager, Ask, TextIO], None]] = {
    1: _add,
    2: _remove,
    3: _show_all,
    4: _show_one,
    5: _edit,
    6: _save,
    7: _load,
    8: _count,
    9: _stats,
}


def run(manager: CourseManager, ask: Ask = input, out: TextIO | None = None) -> None:
    """Serve the menu until the user exits or input runs out."""
    out = sys.stdout if out is None else out
    while True:
        try:
            raw = ask(menu_text())
        except EOFError:
            return
        try:
            choice: int | None = int(raw.strip())
        except ValueError:
            choice = None
        if choice == 0:
            return
        action = _ACTIONS.get(choice) if choice is not None else None
        if action is None:
            out.write("Invalid option.\n")
            continue
        try:
            action(manager, ask, out)
        except EOFError:
            return
        except ValueError as exc:
            out.write(f"Invalid input: {exc}\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive course manager."""
    parser = argparse.ArgumentParser(
        prog="coursemgr", description="Manage courses, topics and tests interactively."
    )
    parser.parse_args(argv)
    try:
        run(CourseManager(), input, sys.stdout)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())