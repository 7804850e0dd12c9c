"""
errors.py
---------
Precondition violations reported by the password generator.

Every error is raised before any randomness is consumed, so a failed call
leaves no partial state behind.
"""

from __future__ import annotations


class PasswordError(ValueError):
    """Base class for invalid generation requests."""


class EmptyAlphabetSet(PasswordError):
    """No alphabet was supplied."""

    def __init__(self):
        super().__init__("At least one alphabet must be given to create a password")


class EmptyAlphabet(PasswordError):
    """One of the supplied alphabets has no symbols."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Alphabet at position {position} has no symbols")


class LengthTooShort(PasswordError):
    """The password is too short to hold one symbol per alphabet."""

    def __init__(self, length: int, alphabet_count: int):
        self.length = length
        self.alphabet_count = alphabet_count
        super().__init__(
            f"Password length must be greater or equal the number of alphabets "
            f"(length={length}, alphabets={alphabet_count})"
        )
