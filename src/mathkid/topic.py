"""Topics, modules and the questions they generate.

A topic is a kind of arithmetic operation. A module binds a topic to a
difficulty :class:`Config` and produces :class:`Question` instances on demand.
Questions grade submitted answers into an :class:`Outcome`.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

U32_MAX = 2**32 - 1
MAX_MAX_VAL = U32_MAX // 2

ANSWER_MIN = -(2**63)
ANSWER_MAX = 2**63 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ConfigError(ValueError):
    """A module configuration was rejected."""


class InvalidRangeError(ConfigError):
    """The configured bounds do not describe a non-empty range."""


class RangeTooLargeError(ConfigError):
    """The configured upper bound exceeds what signed arithmetic can hold."""


class RandRange(Protocol):
    """Source of uniformly distributed integers over a half-open range."""

    def next_range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``; ``low < high`` always holds."""
        ...


class SystemRandRange:
    """Range source backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def next_range(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        return self._random.randrange(low, high)


@dataclass(frozen=True)
class Config:
    """Difficulty parameters for a module."""

    min_val: int
    max_val: int
    allow_negative: bool = False

    def validate(self) -> None:
        """Raise :class:`ConfigError` if the bounds are unusable."""
        if self.min_val < 0:
            raise InvalidRangeError("min_val cannot be negative")
        if self.min_val >= self.max_val:
            raise InvalidRangeError("min_val must be less than max_val")
        if self.max_val > MAX_MAX_VAL:
            raise RangeTooLargeError(f"max_val cannot exceed {MAX_MAX_VAL}")


class Topic(Enum):
    """Kinds of arithmetic operation."""

    ADDITION = "addition"
    SUBTRACTION = "subtraction"

    @property
    def symbol(self) -> str:
        return "+" if self is Topic.ADDITION else "–"

    @property
    def instruction(self) -> str:
        verb = "add" if self is Topic.ADDITION else "subtract"
        return f"Can you {verb} these two numbers for me."


@dataclass(frozen=True)
class Correct:
    """The answer matched."""


@dataclass(frozen=True)
class Incorrect:
    """The answer was a number, but the wrong one."""


@dataclass(frozen=True)
class Invalid:
    """The answer could not be read as a number."""

    reason: str


Outcome = Correct | Incorrect | Invalid


def parse_answer(raw: str) -> int | None:
    """Parse a base-10 signed integer, returning ``None`` if ``raw`` is not one."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not ANSWER_MIN <= value <= ANSWER_MAX:
        return None
    return value


@dataclass(frozen=True)
class Question:
    """One drawn problem instance."""

    topic: Topic
    lhs: int
    rhs: int

    @property
    def expected(self) -> int:
        if self.topic is Topic.ADDITION:
            return self.lhs + self.rhs
        return self.lhs - self.rhs

    @property
    def prompt(self) -> str:
        return f"{self.lhs} {self.topic.symbol} {self.rhs} = ?"

    def __str__(self) -> str:
        return f"{self.topic.instruction}\n{self.prompt}"

    def answer(self, raw: str) -> Outcome:
        """Grade a trimmed answer."""
        value = parse_answer(raw)
        if value is None:
            return Invalid(f"'{raw}' does not appear to be a valid integer")
        if value == self.expected:
            return Correct()
        return Incorrect()


@dataclass(frozen=True)
class Module:
    """A topic instantiated with a validated config."""

    topic: Topic
    config: Config

    def __post_init__(self) -> None:
        self.config.validate()

    @property
    def topic_name(self) -> str:
        return self.topic.value

    def ask(self, rand: RandRange) -> Question:
        """Draw a new question from ``rand``."""
        low, high = self.config.min_val, self.config.max_val
        lhs = rand.next_range(low, high)
        if self.topic is Topic.ADDITION or self.config.allow_negative:
            rhs = rand.next_range(low, high)
        elif lhs == 0:
            rhs = 0
        else:
            # rhs < lhs keeps the difference non-negative.
            rhs = rand.next_range(0, lhs)
        return Question(topic=self.topic, lhs=lhs, rhs=rhs)


def addition(config: Config) -> Module:
    return Module(topic=Topic.ADDITION, config=config)


def subtraction(config: Config) -> Module:
    return Module(topic=Topic.SUBTRACTION, config=config)


def addition_1() -> Module:
    return addition(Config(min_val=0, max_val=10))


def addition_2() -> Module:
    return addition(Config(min_val=0, max_val=9_999))


def addition_3() -> Module:
    return addition(Config(min_val=0, max_val=99_999_999))


def subtraction_1() -> Module:
    return subtraction(Config(min_val=0, max_val=10))


def subtraction_2() -> Module:
    return subtraction(Config(min_val=0, max_val=9_999))


def subtraction_3() -> Module:
    return subtraction(Config(min_val=0, max_val=99_999_999, allow_negative=True))
