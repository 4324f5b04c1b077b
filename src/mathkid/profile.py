"""Student profiles stored as JSON files in a profile directory."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import cast

from unidecode import unidecode

PROFILE_SUFFIX = ".profile.json"

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """A profile could not be read, written, or found."""


def sanitise(text: str) -> str:
    """Return a slug of transliterated, lowercase ASCII letters."""
    transliterated = unidecode(text).lower()
    return "".join(ch for ch in transliterated if ch.isascii() and ch.isalpha())


@dataclass(frozen=True)
class Profile:
    """A student's profile."""

    first_name: str
    course: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Profile:
        try:
            raw_obj: object = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ProfileError(f"malformed profile: {exc}") from exc
        if not isinstance(raw_obj, dict):
            raise ProfileError("profile root must be a JSON object")
        raw = cast(dict[str, object], raw_obj)
        first_name = raw.get("first_name")
        course = raw.get("course")
        if not isinstance(first_name, str) or not isinstance(course, str):
            raise ProfileError("profile requires string fields 'first_name' and 'course'")
        return cls(first_name=first_name, course=course)

    def sanitised_first_name(self) -> str:
        return sanitise(self.first_name)


class ProfileStore:
    """Reads and writes profiles under one directory."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}{PROFILE_SUFFIX}"

    def list_names(self) -> list[str]:
        """Return the sorted names of stored profiles."""
        if not self.directory.is_dir():
            return []
        return sorted(
            entry.name.split(".", 1)[0]
            for entry in self.directory.iterdir()
            if entry.is_file() and entry.name.endswith(PROFILE_SUFFIX)
        )

    def save(self, profile: Profile) -> str:
        """Write a profile and return the name it is stored under."""
        name = profile.sanitised_first_name()
        if not name:
            raise ProfileError(f"cannot derive a profile name from '{profile.first_name}'")
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(name)
        path.write_text(profile.to_json(), encoding="utf-8")
        logger.debug("Saved profile %s to %s", name, path)
        return name

    def load(self, name: str) -> Profile:
        path = self._path(name)
        if not path.is_file():
            raise ProfileError(f"no such profile '{name}'")
        logger.debug("Loading profile %s from %s", name, path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ProfileError(f"malformed profile '{name}': {exc}") from exc
        return Profile.from_json(text)
