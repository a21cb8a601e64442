"""
differ/context.py — rozszerzanie zmian do ich kontekstu strukturalnego.

Dla każdego ChangeRegion:
  okno = wszyscy członkowie najgłębszego bloku z każdą zmienioną linią
       + nagłówki sekcji otaczających te bloki
       (zmieniona linia spoza bloków wnosi tylko siebie)

Okna obu stron są potem nakładane na skrypt edycji. Okna, których zakresy
na skrypcie się nakładają, scalane są w jeden Hunk; tak samo połówki
usunięta i dodana jednego przebiegu zmian. Okna, które jedynie sąsiadują
(np. dwie kolejne sekcje interface), zostają osobnymi Hunkami.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from config_model import (
    BlockForest,
    ChangeRegion,
    ContextWindow,
    DiffEntry,
    EntryKind,
    Hunk,
    NormalizedDocument,
    Side,
)

from .lcs import DELETE, EQUAL, INSERT, Op

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Okna kontekstu
# ---------------------------------------------------------------------------

def context_window(region: ChangeRegion, forest: BlockForest) -> ContextWindow:
    """Linie strony region.side, które trzeba pokazać razem z regionem."""
    indices: set[int] = set()
    blocks = []
    for index in region.indices:
        block = forest.block_for(index)
        if block is None:
            indices.add(index)
            continue
        if block in blocks:
            continue
        blocks.append(block)
        indices.update(block.member_indices)
        for ancestor in block.ancestors():
            if ancestor.header_line_index is not None:
                indices.add(ancestor.header_line_index)
    return ContextWindow(region.side, frozenset(indices), tuple(blocks))


# ---------------------------------------------------------------------------
# Hunks
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Span:
    low: int
    high: int
    windows: dict[Side, ContextWindow] = field(default_factory=dict)

    def absorb(self, other: _Span) -> None:
        self.high = max(self.high, other.high)
        for side, window in other.windows.items():
            mine = self.windows.get(side)
            self.windows[side] = window if mine is None else mine.union(window)

    def shows(self, side: Side, index: int) -> bool:
        window = self.windows.get(side)
        return window is not None and index in window.indices


def build_hunks(
    ops: Sequence[Op],
    left: NormalizedDocument,
    right: NormalizedDocument,
    left_forest: BlockForest,
    right_forest: BlockForest,
    regions: Sequence[ChangeRegion],
) -> list[Hunk]:
    """Grupuje zmiany i ich okna kontekstu w Hunki, w kolejności skryptu."""
    if not regions:
        return []

    position: dict[Side, dict[int, int]] = {Side.LEFT: {}, Side.RIGHT: {}}
    for pos, (tag, i, j) in enumerate(ops):
        if tag in (EQUAL, DELETE):
            position[Side.LEFT][i] = pos
        if tag in (EQUAL, INSERT):
            position[Side.RIGHT][j] = pos

    spans: list[_Span] = []
    for region in regions:
        forest = left_forest if region.side is Side.LEFT else right_forest
        window = context_window(region, forest)
        positions = [position[region.side][k] for k in window.indices]
        spans.append(_Span(min(positions), max(positions), {region.side: window}))

    merged = _merge_spans(spans, ops)
    logger.debug("%d change region(s) merged into %d hunk(s)", len(regions), len(merged))
    return [_emit(span, ops, left, right) for span in merged]


def _merge_spans(spans: list[_Span], ops: Sequence[Op]) -> list[_Span]:
    merged: list[_Span] = []
    for span in sorted(spans, key=lambda s: (s.low, s.high)):
        if merged and _joins(merged[-1], span, ops):
            merged[-1].absorb(span)
        else:
            merged.append(_Span(span.low, span.high, dict(span.windows)))
    return merged


def _joins(current: _Span, span: _Span, ops: Sequence[Op]) -> bool:
    if span.low <= current.high:
        return True
    # stykające się zakresy: łączą się tylko połówki jednego przebiegu zmian
    return (
        span.low == current.high + 1
        and ops[current.high][0] != EQUAL
        and ops[span.low][0] != EQUAL
    )


def _emit(
    span: _Span,
    ops: Sequence[Op],
    left: NormalizedDocument,
    right: NormalizedDocument,
) -> Hunk:
    hunk = Hunk()
    for tag, i, j in ops[span.low:span.high + 1]:
        if tag == DELETE:
            hunk.entries.append(DiffEntry(EntryKind.REMOVED, left[i].text, left_index=i))
        elif tag == INSERT:
            hunk.entries.append(DiffEntry(EntryKind.ADDED, right[j].text, right_index=j))
        elif span.shows(Side.LEFT, i) or span.shows(Side.RIGHT, j):
            hunk.entries.append(DiffEntry(EntryKind.CONTEXT, left[i].text, i, j))
    return hunk
