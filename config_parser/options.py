"""
config_parser/options.py — parametry normalizacji i parsowania struktury.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_GROUP_WORDS = 2
DEFAULT_COMMENT_MARKERS: tuple[str, ...] = ("!",)


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """
    - group_words:               liczba pierwszych słów wspólnych dla kolejnych
                                 linii tworzących grupę (>= 1)
    - blank_line_closes_section: pusta linia zamyka też otwarte sekcje
                                 i przerywa grupy
    - comment_markers:           pierwsze niebiałe znaki komentarza
    """

    group_words: int = DEFAULT_GROUP_WORDS
    blank_line_closes_section: bool = False
    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS

    def __post_init__(self) -> None:
        if self.group_words < 1:
            raise ValueError(f"group_words must be >= 1, got {self.group_words}")
        if not self.comment_markers or not all(self.comment_markers):
            raise ValueError("comment_markers must be non-empty strings")
