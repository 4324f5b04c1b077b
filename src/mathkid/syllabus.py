"""Courses and syllabuses: named groupings of modules."""

from __future__ import annotations

from dataclasses import dataclass

from . import topic
from .topic import Module


class UnknownCourseError(KeyError):
    """No course with the requested name."""

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownTopicError(KeyError):
    """No module in a course teaches the requested topic."""

    def __str__(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True)
class Course:
    """A set of named modules."""

    modules: dict[str, Module]

    def get_topic_names(self) -> list[str]:
        """Return the distinct topic names taught in this course, sorted."""
        return sorted({module.topic_name for module in self.modules.values()})

    def select(self, topic_name: str | None = None) -> list[tuple[str, Module]]:
        """Return (name, module) pairs ordered by name, optionally filtered by topic."""
        selected = [
            (name, module)
            for name, module in sorted(self.modules.items())
            if topic_name is None or module.topic_name == topic_name
        ]
        if not selected:
            if topic_name is None:
                raise UnknownTopicError("course has no modules")
            raise UnknownTopicError(f"no such topic '{topic_name}'")
        return selected


@dataclass(frozen=True)
class Syllabus:
    """The set of courses available to students."""

    courses: dict[str, Course]

    def get_topic_names(self) -> list[str]:
        """Return the distinct topic names taught across all courses, sorted."""
        return sorted({name for course in self.courses.values() for name in course.get_topic_names()})

    def get_course_names(self) -> list[str]:
        return sorted(self.courses)

    def get_course(self, name: str) -> Course:
        course = self.courses.get(name)
        if course is None:
            raise UnknownCourseError(f"no such course '{name}' (try --list courses)")
        return course


def primary() -> Syllabus:
    """The bundled primary-school syllabus."""
    return Syllabus(
        courses={
            "arithmetics_1": Course(
                modules={"addition_1": topic.addition_1(), "subtraction_1": topic.subtraction_1()},
            ),
            "arithmetics_2": Course(
                modules={"addition_2": topic.addition_2(), "subtraction_2": topic.subtraction_2()},
            ),
            "arithmetics_3": Course(
                modules={"addition_3": topic.addition_3(), "subtraction_3": topic.subtraction_3()},
            ),
        }
    )
