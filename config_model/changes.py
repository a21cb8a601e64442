"""
config_model/changes.py — wyniki porównania dwóch znormalizowanych dokumentów.

ChangeRegion  — ciągły przebieg linii usuniętych (lewa) lub dodanych (prawa).
ContextWindow — linie jednej strony, które trzeba pokazać razem ze zmianą.
DiffEntry     — jedna linia raportu (kontekst, usunięta lub dodana).
Hunk          — scalona para okien kontekstu, renderowana jako całość.
DiffResult    — wszystko, co wyprodukowało jedno porównanie.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .blocks import Block, BlockForest
from .lines import NormalizedDocument


class ChangeKind(StrEnum):
    ADDED   = "added"
    REMOVED = "removed"


class Side(StrEnum):
    LEFT  = "left"
    RIGHT = "right"


class EntryKind(StrEnum):
    CONTEXT = "context"
    REMOVED = "removed"
    ADDED   = "added"


@dataclass(frozen=True, slots=True)
class ChangeRegion:
    kind: ChangeKind
    side: Side
    start: int
    stop: int

    @property
    def indices(self) -> range:
        return range(self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start


@dataclass(frozen=True, slots=True)
class ContextWindow:
    """
    Indeksy znormalizowanych linii jednej strony pokazywane razem ze zmianą.

    blocks — bloki, których członkowie weszli do okna; pusta krotka oznacza,
    że zmienione linie nie należą do żadnego bloku (kontekst jednej linii).
    """

    side: Side
    indices: frozenset[int]
    blocks: tuple[Block, ...] = ()

    def union(self, other: ContextWindow) -> ContextWindow:
        if other.side is not self.side:
            raise ValueError("cannot merge windows from different sides")
        blocks = self.blocks + tuple(b for b in other.blocks if b not in self.blocks)
        return ContextWindow(self.side, self.indices | other.indices, blocks)


@dataclass(frozen=True, slots=True)
class DiffEntry:
    kind: EntryKind
    text: str
    left_index: int | None = None
    right_index: int | None = None


@dataclass(slots=True)
class Hunk:
    entries: list[DiffEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def count(self, kind: EntryKind) -> int:
        return sum(1 for e in self.entries if e.kind is kind)


@dataclass(slots=True)
class DiffResult:
    left: NormalizedDocument
    right: NormalizedDocument
    left_forest: BlockForest
    right_forest: BlockForest
    regions: list[ChangeRegion] = field(default_factory=list)
    hunks: list[Hunk] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.hunks

    def stats(self) -> dict[str, int]:
        return {
            "hunks":   len(self.hunks),
            "added":   sum(h.count(EntryKind.ADDED) for h in self.hunks),
            "removed": sum(h.count(EntryKind.REMOVED) for h in self.hunks),
            "context": sum(h.count(EntryKind.CONTEXT) for h in self.hunks),
        }
