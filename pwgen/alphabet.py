import string
from typing import Iterable, Iterator, Tuple


class Alphabet:
    """An ordered set of symbols used as a sampling source for passwords."""

    DEFAULT = string.ascii_letters + string.digits  # a-zA-Z0-9

    __slots__ = ("_symbols",)

    def __init__(self, source: Iterable[str] = DEFAULT):
        symbols = tuple(source)
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(f"Alphabet symbols must be single characters, got {symbol!r}")
        self._symbols: Tuple[str, ...] = symbols

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def size(self) -> int:
        return len(self._symbols)

    def symbol_at(self, index: int) -> str:
        """Returns the symbol at a zero-based position.

        Raises IndexError when `index` is outside [0, size).
        """
        if not 0 <= index < len(self._symbols):
            raise IndexError(
                f"Symbol index {index} out of range for alphabet of size {len(self._symbols)}"
            )
        return self._symbols[index]

    def __getitem__(self, index: int) -> str:
        return self.symbol_at(index)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        preview = "".join(self._symbols[:10])
        return f"Alphabet('{preview}{'...' if len(self._symbols) > 10 else ''}', size={len(self._symbols)})"
