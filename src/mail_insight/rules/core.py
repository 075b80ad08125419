from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class Rule(Protocol[T]):
    name: str
    result: T

    def match(self, text: str) -> bool: ...


def first_match(rules: Sequence[Rule[T]], text: str, default: T) -> T:
    """
    Evaluate rules in list order and return the result of the first match.
    Earlier rules shadow later ones; `default` applies when nothing matches.
    """
    for rule in rules:
        if rule.match(text):
            return rule.result
    return default
