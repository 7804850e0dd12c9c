from __future__ import annotations
from typing import List, Optional
from .alphabet import Alphabet
from .config import DEFAULT_LENGTH
from .generator import PasswordGenerator
from .strategies import RandomSource, make_source


class GeneratorBuilder:
    """Builder configuring a PasswordGenerator."""

    def __init__(self):
        self._alphabets: List[Alphabet] = []
        self._length: int = DEFAULT_LENGTH
        self._rng: Optional[RandomSource] = None

    def with_alphabet(self, charset: str) -> "GeneratorBuilder":
        self._alphabets.append(Alphabet(charset))
        return self

    def with_alphabets(self, *charsets: str) -> "GeneratorBuilder":
        for charset in charsets:
            self.with_alphabet(charset)
        return self

    def with_length(self, length: int) -> "GeneratorBuilder":
        if length < 0:
            raise ValueError("Password length must be >= 0")
        self._length = length
        return self

    def with_seed(self, seed: Optional[int]) -> "GeneratorBuilder":
        self._rng = make_source(seed)
        return self

    def with_random(self, rng: RandomSource) -> "GeneratorBuilder":
        self._rng = rng
        return self

    def build(self) -> PasswordGenerator:
        return PasswordGenerator(self._length, self._alphabets, self._rng)
