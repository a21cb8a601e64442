"""
differ — porównanie dwóch plików konfiguracji z kontekstem strukturalnym.

API publiczne:
  diff(left, right, options)      → list[str]   linie gotowego raportu
  compare(left, right, options)   → DiffResult  hunki + dane pośrednie
  edit_script(a, b)               → list[Op]    dopasowanie na poziomie linii
  change_regions(ops)             → list[ChangeRegion]
  context_window(region, forest)  → ContextWindow
  build_hunks(...)                → list[Hunk]
  render_lines(hunks)             → list[str]
  render_rich(hunks, console)     kolorowe wyjście przez rich
  summary(result)                 → str
"""

from .engine  import compare, diff
from .lcs     import edit_script, change_regions, EQUAL, DELETE, INSERT, MAX_DP_CELLS
from .context import context_window, build_hunks
from .render  import render_lines, render_rich, summary, PREFIX

__all__ = [
    "compare",
    "diff",
    "edit_script",
    "change_regions",
    "EQUAL",
    "DELETE",
    "INSERT",
    "MAX_DP_CELLS",
    "context_window",
    "build_hunks",
    "render_lines",
    "render_rich",
    "summary",
    "PREFIX",
]
