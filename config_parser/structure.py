"""
config_parser/structure.py — grupowanie znormalizowanych linii w bloki logiczne.

Architektura:
  NormalizedDocument → _parse_range(0, N, depth=0)
    → SECTION: linia, po której następują linie głębiej wcięte (nagłówek +
               ciało); ciało parsowane ponownie przez _parse_range, depth + 1
    → GROUP:   2+ kolejne linie o tym samym wcięciu i wspólnych pierwszych
               `group_words` słowach, z których żadna nie otwiera sekcji
    → pozostałe linie nie należą do żadnego bloku
  → BlockForest (roots + najgłębszy blok każdej linii)

Pierwszeństwo, gdy linia pasuje do obu: SECTION wygrywa z GROUP.

Zamknięcie sekcji:
  - pierwsza linia wcięta tak samo lub płycej niż nagłówek
  - koniec zakresu nadrzędnego / dokumentu
  - pusta linia, tylko z ParseOptions.blank_line_closes_section

Główne funkcje publiczne:
  parse_blocks(doc, options) -> BlockForest
  describe_block(block, doc) -> str
"""

from __future__ import annotations

import logging

from config_model import Block, BlockForest, BlockKind, Line, NormalizedDocument

from .options import ParseOptions

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# API publiczne
# ---------------------------------------------------------------------------

def parse_blocks(
    doc: NormalizedDocument,
    options: ParseOptions | None = None,
) -> BlockForest:
    """Buduje las bloków znormalizowanego dokumentu. Nigdy nie rzuca."""
    options = options or ParseOptions()
    innermost: list[Block | None] = [None] * len(doc)
    roots = _parse_range(doc, 0, len(doc), 0, None, options, innermost)
    forest = BlockForest(roots=roots, innermost=innermost)
    logger.debug(
        "parsed %d line(s) into %d block(s), %d top-level",
        len(doc), len(forest), len(roots),
    )
    return forest


def describe_block(block: Block, doc: NormalizedDocument) -> str:
    """Krótka etykieta: nagłówek sekcji albo wspólne słowa grupy."""
    if block.kind is BlockKind.SECTION and block.header_line_index is not None:
        return doc[block.header_line_index].text.strip()
    return f"{block.leading} ..."


# ---------------------------------------------------------------------------
# Implementacja wewnętrzna
# ---------------------------------------------------------------------------

def _parse_range(
    doc: NormalizedDocument,
    start: int,
    stop: int,
    depth: int,
    parent: Block | None,
    options: ParseOptions,
    innermost: list[Block | None],
) -> list[Block]:
    blocks: list[Block] = []
    i = start
    while i < stop:
        # Krok 1: sekcja (nagłówek + głębiej wcięte ciało)
        end = _section_end(doc, i, stop, options)
        if end > i + 1:
            section = Block(
                kind=BlockKind.SECTION,
                start=i,
                stop=end,
                depth=depth,
                header_line_index=i,
                parent=parent,
            )
            _claim(innermost, section)
            # Bloki zagnieżdżone przejmują linie po sekcji,
            # więc innermost wskazuje na najgłębszy.
            section.children = _parse_range(
                doc, i + 1, end, depth + 1, section, options, innermost,
            )
            blocks.append(section)
            i = end
            continue

        # Krok 2: grupa (wspólne pierwsze słowa)
        end = _group_end(doc, i, stop, options)
        if end - i >= 2:
            group = Block(
                kind=BlockKind.GROUP,
                start=i,
                stop=end,
                depth=depth,
                leading=" ".join(_common_words(doc.lines[i:end])),
                parent=parent,
            )
            _claim(innermost, group)
            blocks.append(group)
            i = end
            continue

        # Krok 3: linia poza blokami
        i += 1
    return blocks


def _claim(innermost: list[Block | None], block: Block) -> None:
    for index in block.member_indices:
        innermost[index] = block


def _breaks_at(doc: NormalizedDocument, index: int, options: ParseOptions) -> bool:
    return options.blank_line_closes_section and index in doc.blank_before


def _section_end(
    doc: NormalizedDocument,
    header: int,
    stop: int,
    options: ParseOptions,
) -> int:
    """Pierwszy indeks za ciałem sekcji otwartej w `header`.

    Zwraca header + 1, gdy linia nie otwiera sekcji.
    """
    header_indent = doc.indent(header)
    j = header + 1
    while j < stop and doc.indent(j) > header_indent and not _breaks_at(doc, j, options):
        j += 1
    return j


def _group_end(
    doc: NormalizedDocument,
    first: int,
    stop: int,
    options: ParseOptions,
) -> int:
    """Pierwszy indeks za grupą zaczynającą się w `first`."""
    key = _group_key(doc[first], options.group_words)
    if key is None:
        return first + 1
    indent = doc.indent(first)
    j = first + 1
    while j < stop:
        if doc.indent(j) != indent or _breaks_at(doc, j, options):
            break
        if _group_key(doc[j], options.group_words) != key:
            break
        # zagnieżdżenie sekcji ma pierwszeństwo przed grupą
        if _section_end(doc, j, stop, options) > j + 1:
            break
        j += 1
    return j


def _group_key(line: Line, width: int) -> tuple[str, ...] | None:
    words = line.words
    if len(words) < width:
        return None
    return tuple(words[:width])


def _common_words(lines: tuple[Line, ...]) -> list[str]:
    """Najdłuższy wspólny początek (w słowach) wszystkich linii."""
    common = lines[0].words
    for line in lines[1:]:
        words = line.words
        n = 0
        while n < len(common) and n < len(words) and common[n] == words[n]:
            n += 1
        common = common[:n]
    return common
