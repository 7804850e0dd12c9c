from __future__ import annotations

from typing import List

import pytest


class FixedSource:
    """Random source that always draws the same index and reverses on shuffle."""

    def __init__(self, index: int = 0):
        self.index = index
        self.draws: List[int] = []
        self.shuffles = 0

    def randrange(self, stop: int) -> int:
        self.draws.append(stop)
        return min(self.index, stop - 1)

    def shuffle(self, x) -> None:
        self.shuffles += 1
        x.reverse()


@pytest.fixture
def fixed_source() -> FixedSource:
    return FixedSource()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No PWGEN_* variables and no .env file reachable from the working directory."""
    for name in ("PWGEN_LENGTH", "PWGEN_NUMBER", "PWGEN_SEED", "PWGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
