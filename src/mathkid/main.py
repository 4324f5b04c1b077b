"""CLI entrypoint for the arithmetic tutor."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable
from pathlib import Path

from .profile import ProfileError, sanitise
from .service import TutorError, TutorService
from .syllabus import UnknownCourseError
from .topic import ConfigError, Correct, Incorrect, Invalid, Module, Question, RandRange, SystemRandRange

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
PROFILE_DIR = ".mathkid"
PROFILE_DIR_ENV = "MATHKID_HOME"
DEF_QUESTIONS = 10
LISTINGS = ("topics", "courses", "profiles")

logger = logging.getLogger(__name__)


def _profile_dir() -> Path:
    """Return the profile directory, honouring ``$MATHKID_HOME``."""
    override = os.environ.get(PROFILE_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / PROFILE_DIR


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not a number") from None
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mathkid", description="A maths tutor for kids")
    parser.add_argument("-t", "--topic", help="only ask questions on this topic")
    parser.add_argument("-l", "--list", choices=LISTINGS, help="list topics, courses or profiles")
    parser.add_argument("-c", "--course", help="course to take (defaults to the profile's course)")
    parser.add_argument(
        "-q", "--questions", type=_positive_int, default=DEF_QUESTIONS, help="number of questions per module"
    )
    parser.add_argument("-p", "--profile", help="the profile to use")
    parser.add_argument("--seed", type=int, help="seed the question generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    profile_dir: Path | None = None,
) -> int:
    """Run the CLI application."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        service = TutorService(profile_dir if profile_dir is not None else _profile_dir())
        if args.list is not None:
            _print_listing(service, args.list, args.course, print_fn)
            return 0

        if not service.profile_names():
            _init_profile(service, input_fn, print_fn)
        profile = service.resolve_profile(args.profile)
        modules = service.plan(profile, args.course, args.topic)
        logger.debug("Question generator seed: %s", args.seed)
        rand = SystemRandRange(args.seed)
        run_modules(modules, args.questions, profile.first_name, rand, input_fn, print_fn)
    except (TutorError, ProfileError, ConfigError, UnknownCourseError, OSError) as exc:
        print_fn(f"Error: {exc}")
        return 1
    return 0


def _print_listing(service: TutorService, listing: str, course_name: str | None, print_fn: PrintFn) -> None:
    if listing == "profiles":
        names = service.profile_names()
    elif listing == "courses":
        names = service.course_names()
    else:
        names = service.topic_names(course_name)
    print_fn(f"The following {listing} are available:")
    for name in names:
        print_fn(f"  {name}")


def _init_profile(service: TutorService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Create the first profile interactively."""
    print_fn("It appears we haven't met before. Let's set up a profile first.")
    first_name = readln(input_fn, print_fn, "Your child's first name: ", lambda text: bool(sanitise(text)))
    if first_name is None:
        raise TutorError("cannot continue without a name")

    print_fn(f"We need to enroll {first_name} into a course.")
    courses = service.course_names()
    print_fn("The following courses are available:")
    for course in courses:
        print_fn(f"  {course}")
    course_name = readln(input_fn, print_fn, "Course: ", lambda text: text in courses)
    if course_name is None:
        raise TutorError("cannot continue without a course")
    service.create_profile(first_name, course_name)


def run_modules(
    modules: list[tuple[str, Module]],
    questions: int,
    first_name: str,
    rand: RandRange,
    input_fn: InputFn,
    print_fn: PrintFn,
) -> int:
    """Ask ``questions`` questions from each module; return the number answered correctly."""
    print_fn(f"Hi {first_name}, I've got a few questions for you.")
    correct = 0
    for _, module in modules:
        print_fn(f"Topic: {module.topic_name}")
        for question_no in range(1, questions + 1):
            if ask_question(question_no, module.ask(rand), input_fn, print_fn):
                correct += 1
    total = questions * len(modules)
    print_fn(f"You answered {correct} of {total} questions correctly.")
    print_fn("Congratulations, you've answered all my questions!")
    return correct


def ask_question(question_no: int, question: Question, input_fn: InputFn, print_fn: PrintFn) -> bool:
    """Prompt until the answer is right (True) or input runs out (False)."""
    print_fn(f"Question {question_no}:")
    print_fn(str(question))
    while True:
        answer = readln(input_fn, print_fn, "> ", lambda text: bool(text))
        if answer is None:
            print_fn("You've skipped the question.")
            return False
        outcome = question.answer(answer)
        if isinstance(outcome, Correct):
            print_fn("That's the right answer. Great work!")
            return True
        if isinstance(outcome, Incorrect):
            print_fn("Your answer isn't quite right. Try again!")
        elif isinstance(outcome, Invalid):
            print_fn(f"There was a problem with your answer: {outcome.reason}")


def readln(input_fn: InputFn, print_fn: PrintFn, prompt: str, predicate: Callable[[str], bool]) -> str | None:
    """Read a trimmed line that satisfies ``predicate``; ``None`` at end of input."""
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            return None
        line = line.strip()
        if predicate(line):
            return line
        print_fn("I don't know what you mean.")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
