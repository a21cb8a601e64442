"""
differ/lcs.py — diff linii (skrypt edycji) dwóch dokumentów z zachowaniem kolejności.

edit_script(a, b):
  1. wspólny prefiks i sufiks dopasowywane wprost
  2. środek dopasowuje dokładne programowanie dynamiczne po
     (liczba edycji, liczba przebiegów zmian): spośród minimalnych skryptów
     wygrywa ten z najmniejszą liczbą osobnych przebiegów, więc zmiany
     skupiają się w mniejszej liczbie większych okien kontekstu
  3. środek większy niż MAX_DP_CELLS jest dzielony na pół przejściem LCS
     w pamięci liniowej (Hirschberg), aż kawałki się zmieszczą; skrypt
     pozostaje minimalny, tylko rozstrzyganie remisów działa per kawałek
  4. w każdym przebiegu zmian usunięcia idą przed wstawieniami

Operacje to trójki (tag, i, j): dla EQUAL liczą się oba indeksy, dla
DELETE tylko i (indeks lewy), dla INSERT tylko j (indeks prawy).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from config_model import ChangeKind, ChangeRegion, Side

logger = logging.getLogger(__name__)

EQUAL  = "equal"
DELETE = "delete"
INSERT = "insert"

Op = tuple[str, int, int]

# rows * cols, powyżej którego środek jest dzielony przed dokładnym DP
MAX_DP_CELLS = 250_000


# ---------------------------------------------------------------------------
# API publiczne
# ---------------------------------------------------------------------------

def edit_script(a: Sequence[str], b: Sequence[str]) -> list[Op]:
    n, m = len(a), len(b)

    prefix = 0
    while prefix < n and prefix < m and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while (
        suffix < n - prefix
        and suffix < m - prefix
        and a[n - 1 - suffix] == b[m - 1 - suffix]
    ):
        suffix += 1

    ops: list[Op] = [(EQUAL, k, k) for k in range(prefix)]
    ops.extend(_align_middle(a, b, prefix, n - suffix, prefix, m - suffix))
    ops.extend((EQUAL, n - suffix + k, m - suffix + k) for k in range(suffix))
    return _deletes_first(ops)


def change_regions(ops: Sequence[Op]) -> list[ChangeRegion]:
    """Zwija kolejne usunięcia / wstawienia w ChangeRegion."""
    regions: list[ChangeRegion] = []
    run_tag: str | None = None
    run_start = run_stop = 0

    def _flush() -> None:
        if run_tag == DELETE:
            regions.append(ChangeRegion(ChangeKind.REMOVED, Side.LEFT, run_start, run_stop))
        elif run_tag == INSERT:
            regions.append(ChangeRegion(ChangeKind.ADDED, Side.RIGHT, run_start, run_stop))

    for tag, i, j in ops:
        index = i if tag == DELETE else j
        if tag != EQUAL and tag == run_tag and index == run_stop:
            run_stop += 1
            continue
        _flush()
        if tag == EQUAL:
            run_tag = None
        else:
            run_tag, run_start, run_stop = tag, index, index + 1
    _flush()
    return regions


# ---------------------------------------------------------------------------
# Dopasowanie środka
# ---------------------------------------------------------------------------

def _align_middle(
    a: Sequence[str],
    b: Sequence[str],
    alo: int,
    ahi: int,
    blo: int,
    bhi: int,
) -> list[Op]:
    rows, cols = ahi - alo, bhi - blo
    if rows == 0 or cols == 0:
        return (
            [(DELETE, i, blo) for i in range(alo, ahi)]
            + [(INSERT, alo, j) for j in range(blo, bhi)]
        )
    if rows * cols <= MAX_DP_CELLS:
        return _align_exact(a, b, alo, ahi, blo, bhi)
    if rows == 1:
        return _align_single(a[alo], b, alo, blo, bhi)

    mid = alo + rows // 2
    split = _split_point(a, b, alo, mid, ahi, blo, bhi)
    logger.debug("alignment of %dx%d lines split at %d/%d", rows, cols, mid, split)
    return (
        _align_middle(a, b, alo, mid, blo, split)
        + _align_middle(a, b, mid, ahi, split, bhi)
    )


def _align_exact(
    a: Sequence[str],
    b: Sequence[str],
    alo: int,
    ahi: int,
    blo: int,
    bhi: int,
) -> list[Op]:
    """
    DP po sufiksach z dwoma stanami: s=0 po dopasowaniu (lub na starcie),
    s=1 po edycji. Edycja wykonana w stanie 0 otwiera nowy przebieg zmian.

    Koszt spakowany w jednym int: edycje * weight + przebiegi; weight jest
    większy niż możliwa liczba przebiegów, więc decydują edycje.
    """
    rows, cols = ahi - alo, bhi - blo
    weight = rows + cols + 1
    xs = a[alo:ahi]
    ys = b[blo:bhi]

    # cost[s][i][j] = najtańsze dopasowanie xs[i:], ys[j:] wejściem w stanie s
    after_match = [[0] * (cols + 1) for _ in range(rows + 1)]
    after_edit = [[0] * (cols + 1) for _ in range(rows + 1)]

    for i in range(rows, -1, -1):
        row_m = after_match[i]
        row_e = after_edit[i]
        next_m = after_match[i + 1] if i < rows else None
        next_e = after_edit[i + 1] if i < rows else None
        for j in range(cols, -1, -1):
            if i == rows and j == cols:
                continue
            best_m = best_e = None
            if next_m is not None and j < cols and xs[i] == ys[j]:
                best_m = best_e = next_m[j + 1]
            if next_e is not None:
                cost = next_e[j] + weight
                best_m = cost + 1 if best_m is None else min(best_m, cost + 1)
                best_e = cost if best_e is None else min(best_e, cost)
            if j < cols:
                cost = row_e[j + 1] + weight
                best_m = cost + 1 if best_m is None else min(best_m, cost + 1)
                best_e = cost if best_e is None else min(best_e, cost)
            row_m[j] = best_m
            row_e[j] = best_e

    ops: list[Op] = []
    i = j = 0
    in_edit = False
    while i < rows or j < cols:
        current = after_edit[i][j] if in_edit else after_match[i][j]
        opening = 0 if in_edit else 1
        if i < rows and j < cols and xs[i] == ys[j] and after_match[i + 1][j + 1] == current:
            ops.append((EQUAL, alo + i, blo + j))
            i += 1
            j += 1
            in_edit = False
        elif i < rows and after_edit[i + 1][j] + weight + opening == current:
            ops.append((DELETE, alo + i, blo + j))
            i += 1
            in_edit = True
        else:
            ops.append((INSERT, alo + i, blo + j))
            j += 1
            in_edit = True
    return ops


def _align_single(line: str, b: Sequence[str], i: int, blo: int, bhi: int) -> list[Op]:
    """Jedna lewa linia wobec b[blo:bhi]: dopasowana do pierwszego wystąpienia."""
    for j in range(blo, bhi):
        if b[j] == line:
            return (
                [(INSERT, i, k) for k in range(blo, j)]
                + [(EQUAL, i, j)]
                + [(INSERT, i + 1, k) for k in range(j + 1, bhi)]
            )
    return [(DELETE, i, blo)] + [(INSERT, i + 1, k) for k in range(blo, bhi)]


def _split_point(
    a: Sequence[str],
    b: Sequence[str],
    alo: int,
    mid: int,
    ahi: int,
    blo: int,
    bhi: int,
) -> int:
    """
    Indeks j taki, że dopasowanie a[alo:mid] do b[blo:j] oraz a[mid:ahi]
    do b[j:bhi] nadal daje najdłuższy wspólny podciąg.
    """
    ys = b[blo:bhi]
    forward = _lcs_lengths(a[alo:mid], ys)
    backward = _lcs_lengths(a[mid:ahi][::-1], ys[::-1])
    cols = len(ys)
    best = max(range(cols + 1), key=lambda j: forward[j] + backward[cols - j])
    return blo + best


def _lcs_lengths(xs: Sequence[str], ys: Sequence[str]) -> list[int]:
    """Ostatni wiersz DP: długość LCS xs i każdego prefiksu ys[:j]."""
    row = [0] * (len(ys) + 1)
    for x in xs:
        current = [0]
        for j, y in enumerate(ys):
            current.append(row[j] + 1 if x == y else max(row[j + 1], current[j]))
        row = current
    return row


def _deletes_first(ops: list[Op]) -> list[Op]:
    """W każdym przebiegu zmian przesuwa usunięcia przed wstawienia."""
    result: list[Op] = []
    deletes: list[Op] = []
    inserts: list[Op] = []
    for op in ops:
        if op[0] == DELETE:
            deletes.append(op)
        elif op[0] == INSERT:
            inserts.append(op)
        else:
            result.extend(deletes)
            result.extend(inserts)
            deletes.clear()
            inserts.clear()
            result.append(op)
    result.extend(deletes)
    result.extend(inserts)
    return result
