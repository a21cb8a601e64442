"""
differ/engine.py — jedno porównanie, od początku do końca.

  tekst lewy/prawy → normalize() → NormalizedDocument (dla każdej strony)
                   → parse_blocks() → BlockForest (dla każdej strony)
  znormalizowane linie → edit_script() → change_regions()
  regiony + lasy → build_hunks() → DiffResult → render_lines()

Wszystko działa synchronicznie na tekście w pamięci. Jedyny błąd, jaki
może wyjść, to InputError, gdy przekazane bajty nie są tekstem.
"""

from __future__ import annotations

import logging

from config_model import DiffResult
from config_parser import ParseOptions, decode, normalize, parse_blocks

from .context import build_hunks
from .lcs import change_regions, edit_script
from .render import render_lines

logger = logging.getLogger(__name__)


def compare(
    left_text: str | bytes,
    right_text: str | bytes,
    options: ParseOptions | None = None,
) -> DiffResult:
    """Porównuje dwa teksty konfiguracji, zachowując wszystkie wyniki pośrednie."""
    options = options or ParseOptions()
    if isinstance(left_text, bytes):
        left_text = decode(left_text, "left")
    if isinstance(right_text, bytes):
        right_text = decode(right_text, "right")

    left = normalize(left_text, options)
    right = normalize(right_text, options)
    left_forest = parse_blocks(left, options)
    right_forest = parse_blocks(right, options)

    ops = edit_script(left.texts(), right.texts())
    regions = change_regions(ops)
    hunks = build_hunks(ops, left, right, left_forest, right_forest, regions)

    logger.debug(
        "compared %d vs %d line(s): %d region(s), %d hunk(s)",
        len(left), len(right), len(regions), len(hunks),
    )
    return DiffResult(
        left=left,
        right=right,
        left_forest=left_forest,
        right_forest=right_forest,
        regions=regions,
        hunks=hunks,
    )


def diff(
    left_text: str | bytes,
    right_text: str | bytes,
    options: ParseOptions | None = None,
) -> list[str]:
    """
    Linie gotowego raportu; [] gdy dokumenty są równe po pominięciu
    komentarzy, pustych linii i końcowych białych znaków.
    """
    return render_lines(compare(left_text, right_text, options).hunks)
