"""Application service tying the syllabus to stored profiles."""

from __future__ import annotations

import logging
from pathlib import Path

from .profile import Profile, ProfileStore
from .syllabus import Syllabus, UnknownCourseError, UnknownTopicError, primary
from .topic import Module

logger = logging.getLogger(__name__)


class TutorError(Exception):
    """A request could not be satisfied."""


class TutorService:
    """Coordinates profile lookup and module selection."""

    def __init__(self, profile_dir: Path | str, syllabus: Syllabus | None = None) -> None:
        self.syllabus = syllabus if syllabus is not None else primary()
        self.profiles = ProfileStore(profile_dir)

    def profile_names(self) -> list[str]:
        return self.profiles.list_names()

    def course_names(self) -> list[str]:
        return self.syllabus.get_course_names()

    def topic_names(self, course_name: str | None = None) -> list[str]:
        """Return topic names for one course, or for the whole syllabus."""
        if course_name is None:
            return self.syllabus.get_topic_names()
        return self.syllabus.get_course(course_name).get_topic_names()

    def create_profile(self, first_name: str, course_name: str) -> Profile:
        """Enroll a new student in a course and store the profile."""
        self.syllabus.get_course(course_name)
        profile = Profile(first_name=first_name.strip(), course=course_name)
        self.profiles.save(profile)
        return profile

    def resolve_profile(self, name: str | None = None) -> Profile:
        """Load the named profile, or the only profile when no name is given."""
        names = self.profile_names()
        if name is None:
            if len(names) != 1:
                raise TutorError("please select a profile (try --list profiles)")
            name = names[0]
        elif name not in names:
            raise TutorError(f"no such profile '{name}'")
        return self.profiles.load(name)

    def plan(
        self, profile: Profile, course_name: str | None = None, topic_name: str | None = None
    ) -> list[tuple[str, Module]]:
        """Return the (name, module) pairs to run for a profile."""
        course_name = course_name or profile.course
        try:
            course = self.syllabus.get_course(course_name)
        except UnknownCourseError as exc:
            raise TutorError(str(exc)) from exc
        try:
            selected = course.select(topic_name)
        except UnknownTopicError as exc:
            if topic_name is None:
                raise TutorError(f"course '{course_name}' has no modules") from exc
            raise TutorError(
                f"no such topic '{topic_name}' in course '{course_name}' (try --list topics)"
            ) from exc
        logger.debug("Course %s: running modules %s", course_name, [name for name, _ in selected])
        return selected
