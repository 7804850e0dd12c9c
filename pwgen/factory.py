"""
factory.py
----------
Static factory: one-line creation of ready-to-use password generators.
"""

from __future__ import annotations
from typing import Iterable, Optional
from .builder import GeneratorBuilder
from .config import DEFAULT_LENGTH, Settings
from .generator import PasswordGenerator


class GeneratorFactory:
    """Static factory for PasswordGenerator instances."""

    @staticmethod
    def from_charsets(charsets: Iterable[str], length: int = DEFAULT_LENGTH,
                      seed: Optional[int] = None) -> PasswordGenerator:
        return (
            GeneratorBuilder()
            .with_alphabets(*charsets)
            .with_length(length)
            .with_seed(seed)
            .build()
        )

    @staticmethod
    def from_settings(charsets: Iterable[str], settings: Settings) -> PasswordGenerator:
        return GeneratorFactory.from_charsets(charsets, length=settings.length, seed=settings.seed)
