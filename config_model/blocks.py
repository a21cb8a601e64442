"""
config_model/blocks.py — bloki strukturalne pliku konfiguracji.

Block to pojedynczy węzeł z etykietą (BlockKind.SECTION lub BlockKind.GROUP)
z płaskim członkostwem po indeksach: member_indices to zawsze ciągły zakres
indeksów znormalizowanych linii. Referencje parent służą wyłącznie do
chodzenia na zewnątrz; własność biegnie od BlockForest.roots w dół.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class BlockKind(StrEnum):
    SECTION = "section"
    GROUP   = "group"


@dataclass(eq=False, slots=True)
class Block:
    """
    Węzeł lasu strukturalnego.

    - kind:              SECTION (nagłówek + głębiej wcięte ciało) lub GROUP
                         (kolejne linie o wspólnych pierwszych słowach)
    - start, stop:       linie bloku to range(start, stop)
    - depth:             0 dla bloków najwyższego poziomu
    - header_line_index: pierwsza linia SECTION, None dla GROUP
    - leading:           wspólny początek linii GROUP, "" dla SECTION
    """

    kind: BlockKind
    start: int
    stop: int
    depth: int = 0
    header_line_index: int | None = None
    leading: str = ""
    parent: Block | None = field(default=None, repr=False)
    children: list[Block] = field(default_factory=list, repr=False)

    @property
    def member_indices(self) -> range:
        return range(self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.stop

    def ancestors(self) -> Iterator[Block]:
        """Bloki otaczające, od najbliższego."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


@dataclass(slots=True)
class BlockForest:
    """
    Sparsowana struktura jednego NormalizedDocument.

    - roots:     bloki najwyższego poziomu w kolejności dokumentu
    - innermost: innermost[i] to najgłębszy blok zawierający linię i,
                 albo None, gdy linia nie należy do żadnego bloku
    """

    roots: list[Block] = field(default_factory=list)
    innermost: list[Block | None] = field(default_factory=list)

    def block_for(self, index: int) -> Block | None:
        return self.innermost[index]

    def walk(self) -> Iterator[Block]:
        """Wszystkie bloki, w głąb, w kolejności dokumentu."""
        stack = list(reversed(self.roots))
        while stack:
            block = stack.pop()
            yield block
            stack.extend(reversed(block.children))

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())
