from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from src.mm_common.enums import GameKey
from src.mm_matching.domain.models import Entry


@dataclass
class WaitingPool:
    """Ordered collection of searching entries for one game.

    At most one entry per identity. Insertion order is kept only so the
    pairing scan is deterministic.
    """

    game: GameKey
    _entries: list[Entry] = field(default_factory=list)

    def insert(self, entry: Entry) -> None:
        """Replace any stale entry for the same identity, then append."""
        self.remove_by_identity(entry.identity)
        self._entries.append(entry)

    def remove_by_identity(self, identity: str) -> bool:
        for i, entry in enumerate(self._entries):
            if entry.identity == identity:
                del self._entries[i]
                return True
        return False

    def find(self, identity: str) -> Entry | None:
        for entry in self._entries:
            if entry.identity == identity:
                return entry
        return None

    def scan(self) -> Iterator[Entry]:
        """Lazy view in insertion order; call again to restart."""
        yield from self._entries

    def replace_all(self, entries: Iterable[Entry]) -> None:
        self._entries = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identity: object) -> bool:
        return any(entry.identity == identity for entry in self._entries)
