"""
config_model/lines.py — linie pliku konfiguracji po normalizacji.

Line               — jedna surowa linia (bez końcowych białych znaków) z jej
                     pozycją w pliku źródłowym i flagą komentarza.
NormalizedDocument — uporządkowany ciąg linii bez komentarzy i pustych linii,
                     na którym pracują parser i differ.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Line:
    text: str            # końcowe białe znaki już usunięte
    source_index: int    # numer linii w surowym pliku, od 0
    is_comment: bool = False

    @property
    def indent(self) -> int:
        """Szerokość wcięcia; tabulator rozwijany do 8 kolumn."""
        expanded = self.text.expandtabs(8)
        return len(expanded) - len(expanded.lstrip())

    @property
    def words(self) -> list[str]:
        return self.text.split()


@dataclass(frozen=True, slots=True)
class NormalizedDocument:
    """
    Niemutowalny ciąg linii (bez komentarzy) indeksowany 0..N-1.

    - lines:        linie porównywane przez differ (bez komentarzy i pustych)
    - comments:     odrzucone komentarze, zachowane tylko do podglądu
    - blank_before: indeksy linii poprzedzonych co najmniej jedną pustą linią
    """

    lines: tuple[Line, ...] = ()
    comments: tuple[Line, ...] = ()
    blank_before: frozenset[int] = field(default_factory=frozenset)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]

    def __iter__(self):
        return iter(self.lines)

    def texts(self) -> list[str]:
        return [line.text for line in self.lines]

    def indent(self, index: int) -> int:
        return self.lines[index].indent
