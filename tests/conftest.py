from __future__ import annotations

import shutil
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class ScriptedRand:
    """Range source that returns scripted offsets from the low bound.

    Each draw records the requested ``(low, high)`` so tests can check both the
    ranges asked for and how many draws happened.
    """

    def __init__(self, offsets: list[int]) -> None:
        self.offsets = list(offsets)
        self.calls: list[tuple[int, int]] = []

    def next_range(self, low: int, high: int) -> int:
        assert low < high, f"empty range [{low}, {high})"
        offset = self.offsets[len(self.calls)]
        assert 0 <= offset < high - low
        self.calls.append((low, high))
        return low + offset


@pytest.fixture
def scripted_rand() -> Callable[[list[int]], ScriptedRand]:
    return ScriptedRand


def _tmp_path_fixture() -> Iterator[Path]:
    """Provide a per-test temporary directory inside the workspace at ``.tmp_pytest/``."""
    base = ROOT / ".tmp_pytest"
    base.mkdir(parents=True, exist_ok=True)
    path = base / str(uuid4())
    path.mkdir(parents=True, exist_ok=False)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        try:
            next(base.iterdir())
        except StopIteration:
            base.rmdir()
        except FileNotFoundError:
            pass


tmp_path = pytest.fixture(name="tmp_path")(_tmp_path_fixture)
