from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class BaseRule(ABC, Generic[T]):
    """
    Base class for all cascade rules: a predicate over raw text plus the
    result it stands for.

    Design goals:
    - Provide consistent, reusable text matching helpers.
    - Keep rule tables readable and declarative.
    """

    # Human-/debug-friendly unique name
    name: str = "base_rule"

    def __init__(self, name: str, result: T) -> None:
        self.name = name
        self.result = result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, result={self.result!r})"

    # --- Helpers (None-safe, case-insensitive) ---

    def norm(self, s: str | None) -> str:
        """Normalize text for matching (None-safe, lowercased)."""
        return (s or "").lower()

    def contains_any(self, text: str | None, needles: Sequence[str]) -> bool:
        """True if any needle is a substring of text (case-insensitive)."""
        t = self.norm(text)
        return any(n.lower() in t for n in needles)

    def regex(self, text: str | None, pattern: str | re.Pattern[str]) -> bool:
        """Regex search on text (case-insensitive)."""
        if isinstance(pattern, re.Pattern):
            return bool(pattern.search(text or ""))
        return bool(re.search(pattern, text or "", flags=re.IGNORECASE))

    # --- Rule API ---

    @abstractmethod
    def match(self, text: str) -> bool:
        raise NotImplementedError


class KeywordRule(BaseRule[T]):
    """Matches when any keyword occurs as a substring, ignoring case."""

    def __init__(self, name: str, keywords: Sequence[str], result: T) -> None:
        super().__init__(name, result)
        self.keywords = tuple(keywords)

    def match(self, text: str) -> bool:
        return self.contains_any(text, self.keywords)


class PatternRule(BaseRule[T]):
    """Matches when the regex finds a hit anywhere in the text."""

    def __init__(self, name: str, pattern: str | re.Pattern[str], result: T) -> None:
        super().__init__(name, result)
        self.pattern = pattern

    def match(self, text: str) -> bool:
        return self.regex(text, self.pattern)
