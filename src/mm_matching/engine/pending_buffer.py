"""One-shot mailbox for match results awaiting pickup.

A result is stored for the non-initiating player of a pairing and removed in
the same locked step that hands it out, so it is delivered at most once.
"""

import threading

from src.mm_matching.domain.models import MatchResult


class PendingBuffer:
    def __init__(self) -> None:
        self._results: dict[str, MatchResult] = {}
        self._lock = threading.Lock()

    def put(self, identity: str, result: MatchResult) -> None:
        with self._lock:
            self._results[identity] = result

    def consume(self, identity: str) -> MatchResult | None:
        with self._lock:
            return self._results.pop(identity, None)

    def discard(self, identity: str) -> bool:
        with self._lock:
            return self._results.pop(identity, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._results
