"""
config_parser/normalizer.py — zamiana surowego tekstu konfiguracji na linie.

Co jest odrzucane:
  - linie komentarzy (pierwszy niebiały znak to znacznik komentarza, "!")
  - puste linie (zapamiętane w blank_before, nigdy nie porównywane)
  - końcowe białe znaki każdej linii

Co zostaje:
  - wcięcie i białe znaki wewnątrz linii, bez zmian
  - numer surowej linii każdej zachowanej linii

normalize() nigdy nie zawodzi. Odczyt i dekodowanie też są tutaj i tylko
one w rdzeniu rzucają wyjątki (InputError).
"""

from __future__ import annotations

import logging
from pathlib import Path

from config_model import ErrorCode, InputError, Line, NormalizedDocument

from .options import ParseOptions

logger = logging.getLogger(__name__)

_ENCODING = "utf-8-sig"


# ---------------------------------------------------------------------------
# API publiczne
# ---------------------------------------------------------------------------

def normalize(text: str, options: ParseOptions | None = None) -> NormalizedDocument:
    """
    Normalizuje jeden plik konfiguracji.

    Końce linii jak w str.splitlines(), więc pliki z "\\n", "\\r\\n" i "\\r"
    porównują się jako równe.
    """
    options = options or ParseOptions()
    markers = options.comment_markers

    lines: list[Line] = []
    comments: list[Line] = []
    blank_before: set[int] = set()
    pending_blank = False

    for source_index, raw in enumerate(text.splitlines()):
        stripped = raw.rstrip()
        if not stripped:
            pending_blank = True
            continue
        if stripped.lstrip().startswith(markers):
            comments.append(Line(stripped, source_index, is_comment=True))
            continue
        if pending_blank and lines:
            blank_before.add(len(lines))
        pending_blank = False
        lines.append(Line(stripped, source_index))

    logger.debug(
        "normalized %d line(s): %d kept, %d comment(s)",
        len(lines) + len(comments), len(lines), len(comments),
    )
    return NormalizedDocument(tuple(lines), tuple(comments), frozenset(blank_before))


def decode(data: bytes, path: str | None = None) -> str:
    """Dekoduje bajty jako UTF-8 (początkowy BOM jest pomijany)."""
    try:
        return data.decode(_ENCODING)
    except UnicodeDecodeError as exc:
        raise InputError(
            ErrorCode.DECODE,
            f"not valid UTF-8 text (byte {exc.start})",
            path,
        ) from exc


def read_config(path: str | Path) -> str:
    """Wczytuje cały plik konfiguracji do pamięci."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise InputError(ErrorCode.FILE_NOT_FOUND, "no such file", str(path)) from exc
    except OSError as exc:
        raise InputError(
            ErrorCode.FILE_UNREADABLE,
            exc.strerror or "cannot read file",
            str(path),
        ) from exc
    return decode(data, str(path))
