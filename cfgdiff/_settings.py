"""Ustawienia CLI cfgdiff, czytane ze zmiennych środowiskowych (opcjonalnie .env)."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from config_parser import DEFAULT_GROUP_WORDS, ParseOptions

DEFAULT_IGNORE_FILE = "/etc/cfgdiff/ignore"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class Settings:
    ignore_file: Path
    group_words: int
    blank_closes_section: bool
    resolve_dns: bool

    def parse_options(
        self,
        group_words: int | None = None,
        blank_closes_section: bool | None = None,
    ) -> ParseOptions:
        """ParseOptions; wartości z linii komend mają pierwszeństwo."""
        return ParseOptions(
            group_words=self.group_words if group_words is None else group_words,
            blank_line_closes_section=(
                self.blank_closes_section
                if blank_closes_section is None
                else blank_closes_section
            ),
        )


def load_settings(env_file: Path | None = None) -> Settings:
    # Zmienne już obecne w środowisku wygrywają z .env.
    load_dotenv(env_file or Path.cwd() / ".env", override=False)
    return Settings(
        ignore_file          = Path(os.getenv("CFGDIFF_IGNORE_FILE", DEFAULT_IGNORE_FILE)),
        group_words          = _int("CFGDIFF_GROUP_WORDS", DEFAULT_GROUP_WORDS),
        blank_closes_section = _bool("CFGDIFF_BLANK_CLOSES_SECTION", False),
        resolve_dns          = _bool("CFGDIFF_RESOLVE_DNS", True),
    )


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false), got {raw!r}")


def positive_int(text: str) -> int:
    """Typ argparse dla --group-words."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value
