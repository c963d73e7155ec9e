"""Core course data: faculty, topics, assessments and courses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Faculty:
    """The member of staff who teaches a course."""

    name: str = ""

    def __str__(self) -> str:
        return self.name


@dataclass
class Topic:
    """A single topic covered by a course."""

    id: int = 0
    title: str = ""
    completed: bool = False
    difficulty: str = ""
    description: str = ""

    def render(self) -> str:
        """Return the one-line description of the topic."""
        return (
            f"[Topic] ID: {self.id}, Title: {self.title}, "
            f"Completed: {'Yes' if self.completed else 'No'}, "
            f"Difficulty: {self.difficulty}, Description: {self.description}\n"
        )


@dataclass
class Test(ABC):
    """An assessment belonging to a course; concrete kinds supply a label."""

    name: str = ""
    component: int = 0
    marks: int = 0

    @property
    @abstractmethod
    def kind(self) -> str:
        """Label shown in front of the assessment details."""

    def __str__(self) -> str:
        return (
            f"Test Name: {self.name}\n"
            f"Component: {self.component}\n"
            f"Marks: {self.marks}\n"
        )

    def render(self) -> str:
        """Return the labelled description of the assessment."""
        return f"[{self.kind}] \n{self}"


@dataclass
class Quiz(Test):
    """A quiz."""

    @property
    def kind(self) -> str:
        return "Quiz"


@dataclass
class Assignment(Test):
    """An assignment."""

    @property
    def kind(self) -> str:
        return "Assignment"


@dataclass
class FinalExam(Test):
    """A final examination."""

    @property
    def kind(self) -> str:
        return "Final Exam"


@dataclass
class Course:
    """A course with its faculty, topics and assessments."""

    id: int
    name: str
    faculty: Faculty = field(default_factory=Faculty)
    topics: list[Topic] = field(default_factory=list)
    quizzes: list[Quiz] = field(default_factory=list)
    assignments: list[Assignment] = field(default_factory=list)
    finals: list[FinalExam] = field(default_factory=list)

    @property
    def tests(self) -> list[Test]:
        """All assessments: quizzes, then assignments, then finals."""
        return [*self.quizzes, *self.assignments, *self.finals]

    def render(self) -> str:
        """Return the full multi-line description of the course."""
        parts = [
            f"\n[=== Course ID: {self.id} | Name: {self.name} ===]\n",
            f"Faculty: {self.faculty.name}\n",
            "--- Topics ---\n",
        ]
        parts.extend(topic.render() for topic in self.topics)
        parts.append("--- Tests ---\n")
        parts.extend(test.render() for test in self.tests)
        parts.append("===========================\n")
        return "".join(parts)