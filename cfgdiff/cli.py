"""
cfgdiff — diff plików konfiguracji urządzeń z kontekstem strukturalnym.

Użycie:
  cfgdiff <komenda> [opcje]

Komendy:
  diff     Porównuje dwa pliki konfiguracji; każda zmiana pokazywana jest
           z całym blokiem (interface, ACL, class-map ...), do którego należy.
  blocks   Pokazuje bloki (sekcje i grupy) rozpoznane w jednym pliku.

Kody wyjścia:
  0  sukces, z różnicami lub bez, albo cel na liście ignorowanych
  1  błąd użycia, brak lub nieczytelny plik wejściowy
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cfgdiff._settings import load_settings
from cfgdiff.commands import blocks as cmd_blocks
from cfgdiff.commands import diff as cmd_diff

VERSION = "0.1.0"


class _ArgumentParser(argparse.ArgumentParser):
    """argparse z błędami użycia mapowanymi na kod wyjścia 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="cfgdiff",
        description="cfgdiff — diff konfiguracji z kontekstem strukturalnym.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"cfgdiff {VERSION}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Logi debug na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_diff.add_parser(subparsers)
    cmd_blocks.add_parser(subparsers)

    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        args.settings = load_settings()
    except ValueError as exc:
        Console(stderr=True).print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    args.func(args)


if __name__ == "__main__":
    main()
