from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from .alphabet import Alphabet
from .errors import EmptyAlphabet, EmptyAlphabetSet, LengthTooShort
from .strategies import RandomSource, default_source

logger = logging.getLogger(__name__)


def validate_request(length: int, alphabets: Sequence[Alphabet]) -> None:
    """Raises a PasswordError if no password can be built from the request."""
    if not alphabets:
        raise EmptyAlphabetSet()
    for position, abc in enumerate(alphabets):
        if len(abc) == 0:
            raise EmptyAlphabet(position)
    if length < len(alphabets):
        raise LengthTooShort(length, len(alphabets))


def generate(length: int, alphabets: Sequence[Alphabet], rng: Optional[RandomSource] = None) -> str:
    """
    Produces a single password of `length` symbols containing at least one
    symbol of every alphabet.

    One symbol is drawn from each alphabet, the rest is drawn from the union
    of all alphabets (duplicates included, so they weigh more), then the
    whole sequence is shuffled.
    """
    validate_request(length, alphabets)
    if rng is None:
        rng = default_source()
    logger.debug("Generating password: length=%d, alphabets=%d", length, len(alphabets))

    password: List[str] = []
    for abc in alphabets:
        password.append(abc.symbol_at(rng.randrange(len(abc))))

    symbols: List[str] = []
    for abc in alphabets:
        symbols.extend(abc.symbols)

    while len(password) < length:
        password.append(symbols[rng.randrange(len(symbols))])

    rng.shuffle(password)
    return "".join(password)


class PasswordIterator:
    """
    Lazy iterator over `count` passwords produced by a PasswordGenerator.
    """

    def __init__(self, generator: "PasswordGenerator", count: int):
        if count < 0:
            raise ValueError("count must be >= 0")
        self._generator = generator
        self._remaining = int(count)

    @property
    def remaining(self) -> int:
        return self._remaining

    def __iter__(self) -> "PasswordIterator":
        return self

    def __next__(self) -> str:
        if self._remaining <= 0:
            raise StopIteration
        self._remaining -= 1
        return self._generator.produce()


class PasswordGenerator:
    """
    Stateful wrapper around generate(): keeps the length, the alphabets and
    the random source so passwords can be produced repeatedly.

    The request is validated at construction, so a misconfigured generator
    never gets created.
    """

    def __init__(self, length: int, alphabets: Sequence[Alphabet], rng: Optional[RandomSource] = None):
        self.length = length
        self.alphabets: Tuple[Alphabet, ...] = tuple(alphabets)
        self.rng = rng if rng is not None else default_source()
        validate_request(self.length, self.alphabets)

    @property
    def union_size(self) -> int:
        """Number of symbols the fill phase samples from."""
        return sum(len(abc) for abc in self.alphabets)

    def produce(self) -> str:
        return generate(self.length, self.alphabets, self.rng)

    def produce_many(self, count: int) -> List[str]:
        return list(self.iterator(count))

    def iterator(self, count: int) -> PasswordIterator:
        return PasswordIterator(self, count)

    def __iter__(self) -> Iterator[str]:
        # endless stream; callers bound it themselves (itertools.islice)
        while True:
            yield self.produce()

    def __repr__(self) -> str:
        return f"PasswordGenerator(length={self.length}, alphabets={list(self.alphabets)!r})"
