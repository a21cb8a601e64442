"""
differ/render.py — postać porównania do wydruku.

Prefiksy linii:
  " "  linia kontekstu (bez zmian, pokazana dla struktury)
  "-"  linia usunięta (tylko lewa strona)
  "+"  linia dodana (tylko prawa strona)

Hunki drukowane są w kolejności z differa, rozdzielone jedną pustą linią.
Nic nie jest tu przestawiane.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from config_model import DiffResult, EntryKind, Hunk

PREFIX: dict[EntryKind, str] = {
    EntryKind.CONTEXT: " ",
    EntryKind.REMOVED: "-",
    EntryKind.ADDED:   "+",
}

_STYLE: dict[EntryKind, str] = {
    EntryKind.CONTEXT: "dim",
    EntryKind.REMOVED: "red",
    EntryKind.ADDED:   "green",
}


def render_lines(hunks: Sequence[Hunk]) -> list[str]:
    lines: list[str] = []
    for n, hunk in enumerate(hunks):
        if n:
            lines.append("")
        lines.extend(PREFIX[e.kind] + e.text for e in hunk.entries)
    return lines


def render_rich(hunks: Sequence[Hunk], console: Console) -> None:
    """Drukuje raport w kolorach.

    Tekst konfiguracji nigdy nie jest parsowany jako markup rich.
    """
    for n, hunk in enumerate(hunks):
        if n:
            console.print()
        for e in hunk.entries:
            console.print(
                Text(PREFIX[e.kind] + e.text, style=_STYLE[e.kind]),
                highlight=False,
                soft_wrap=True,
            )


def summary(result: DiffResult) -> str:
    stats = result.stats()
    return f"{stats['hunks']} hunk(s), +{stats['added']} -{stats['removed']}"
