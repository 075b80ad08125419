from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from time import time
from typing import Any, Dict, Optional


@dataclass
class LatestResult:
    sequence: int = 0
    kind: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None
    updated_at: float = field(default_factory=time)


class ResultStore:
    """
    Cache of the latest parse/analysis result with last-call-wins semantics.

    Every action takes a ticket with begin(); publish() only replaces the
    cached result if no action that started later has already published.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._next_sequence = 0
        self._latest = LatestResult()

    def begin(self) -> int:
        with self._lock:
            self._next_sequence += 1
            return self._next_sequence

    def publish(self, sequence: int, kind: str, payload: Dict[str, Any]) -> bool:
        """Return False when the result is stale and was dropped."""
        with self._lock:
            if sequence < self._latest.sequence:
                return False
            self._latest = LatestResult(sequence=sequence, kind=kind, payload=payload)
            return True

    def snapshot(self) -> Dict[str, Any]:
        # Return a copy to avoid mutation by callers.
        with self._lock:
            return {
                "sequence": self._latest.sequence,
                "kind": self._latest.kind,
                "payload": dict(self._latest.payload) if self._latest.payload else None,
                "updated_at": self._latest.updated_at,
            }


result_store = ResultStore()
