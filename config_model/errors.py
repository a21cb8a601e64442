"""
config_model/errors.py — kody błędów i wyjątki rzucane przez rdzeń.

Błędem jest wyłącznie problem z wejściem: brak pliku, brak dostępu albo
treść niedekodowalna jako tekst. Parsowanie i diff nigdy nie rzucają;
niejednoznaczności rozstrzygają stałe reguły pierwszeństwa.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    FILE_NOT_FOUND  = "E_FILE_NOT_FOUND"
    FILE_UNREADABLE = "E_FILE_UNREADABLE"
    DECODE          = "E_DECODE"


class CfgDiffError(Exception):
    """Bazowa klasa błędów cfgdiff."""

    def __init__(self, code: ErrorCode, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class InputError(CfgDiffError):
    """Wymagane wejście nie istnieje, nie da się go odczytać lub nie jest tekstem."""
