import pytest

from coursemgr import models


def test_topic_render_completed():
    topic = models.Topic(3, "Loops", True, "Easy", "For and while")
    assert topic.render() == (
        "[Topic] ID: 3, Title: Loops, Completed: Yes, "
        "Difficulty: Easy, Description: For and while\n"
    )


def test_topic_render_not_completed():
    topic = models.Topic(1, "Intro", False, "Hard", "Start")
    assert "Completed: No" in topic.render()


def test_topic_defaults_and_equality():
    assert models.Topic() == models.Topic(0, "", False, "", "")
    assert models.Topic(1, "a") != models.Topic(2, "a")


def test_abstract_test_cannot_be_built():
    with pytest.raises(TypeError):
        models.Test("x", 1, 2)


def test_quiz_render():
    quiz = models.Quiz("Q1", 10, 20)
    text = quiz.render()
    assert text.startswith("[Quiz] \n")
    assert text.endswith("Test Name: Q1\nComponent: 10\nMarks: 20\n")


@pytest.mark.parametrize(
    "cls, label",
    [
        (models.Quiz, "[Quiz] \n"),
        (models.Assignment, "[Assignment] \n"),
        (models.FinalExam, "[Final Exam] \n"),
    ],
)
def test_labels(cls, label):
    assessment = cls("N", 1, 2)
    assert assessment.render() == label + str(assessment)


def test_different_kinds_not_equal():
    assert models.Quiz("a", 1, 2) != models.Assignment("a", 1, 2)
    assert models.Quiz("a", 1, 2) == models.Quiz("a", 1, 2)


def test_course_render_layout():
    course = models.Course(
        7,
        "OOP",
        models.Faculty("Dr. Ada"),
        [models.Topic(1, "Classes")],
        [models.Quiz("Q", 1, 5)],
        [models.Assignment("A", 2, 10)],
        [models.FinalExam("F", 3, 50)],
    )
    text = course.render()
    assert text.startswith("\n[=== Course ID: 7 | Name: OOP ===]\n")
    assert "Faculty: Dr. Ada\n" in text
    assert text.endswith("===========================\n")
    assert text.index("--- Topics ---") < text.index("[Topic]") < text.index("--- Tests ---")
    assert text.index("[Quiz]") < text.index("[Assignment]") < text.index("[Final Exam]")


def test_course_tests_order():
    quiz = models.Quiz("Q", 1, 1)
    final = models.FinalExam("F", 1, 1)
    assignment = models.Assignment("A", 1, 1)
    course = models.Course(1, "C", quizzes=[quiz], assignments=[assignment], finals=[final])
    assert course.tests == [quiz, assignment, final]


def test_course_default_lists_are_independent():
    first = models.Course(1, "A")
    second = models.Course(2, "B")
    first.topics.append(models.Topic(1))
    assert second.topics == []
    assert second.faculty == models.Faculty("")