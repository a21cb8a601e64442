"""Komenda: cfgdiff diff — porównanie dwóch plików konfiguracji z kontekstem."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cfgdiff._device import banner, device_name, is_ignored, read_ignore_list
from cfgdiff._settings import positive_int
from config_model import InputError
from config_parser import read_config
from differ import compare, render_rich, summary

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def _output_console(color: str) -> Console:
    if color == "always":
        return Console(force_terminal=True)
    if color == "never":
        return Console(color_system=None)
    return Console()


def _ignore_entries(path: Path) -> set[str]:
    try:
        return read_ignore_list(path)
    except OSError as exc:
        err_console.print(
            f"[yellow]Cannot read ignore list[/yellow] {escape(str(path))}: "
            f"{escape(exc.strerror or str(exc))}"
        )
        return set()


# ---------------------------------------------------------------------------
# Logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = args.settings
    target: str = args.right

    # --- Lista ignorowanych ----------------------------------------------
    ignore_file = Path(args.ignore_file) if args.ignore_file else settings.ignore_file
    if is_ignored(target, _ignore_entries(ignore_file)):
        logger.debug("%s is on the ignore list %s", target, ignore_file)
        return

    try:
        options = settings.parse_options(args.group_words, args.blank_closes_section)
    except ValueError as exc:
        err_console.print(f"[red]Invalid option:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    # --- Wejście ---------------------------------------------------------
    try:
        left_text = read_config(args.left)
        right_text = read_config(args.right)
    except InputError as exc:
        err_console.print(f"[red]Input error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    # --- Porównanie (w całości, zanim cokolwiek zostanie wypisane) -------
    result = compare(left_text, right_text, options)
    if result.is_empty:
        logger.debug("no differences between %s and %s", args.left, args.right)
        return

    out = _output_console(args.color)
    if not args.no_banner:
        resolve = settings.resolve_dns and not args.no_dns
        for line in banner(device_name(target, resolve=resolve)):
            out.print(line, markup=False, highlight=False, soft_wrap=True)
    render_rich(result.hunks, out)

    if args.summary:
        out.print()
        out.print(summary(result), style="bold", markup=False, highlight=False)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "diff",
        help="Porównuje dwa pliki konfiguracji z pełnym kontekstem bloków.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Porównuje LEFT (przed) z RIGHT (po). Linie komentarzy ("!"), puste linie
i końcowe białe znaki są pomijane. Każda zmiana wypisywana jest razem
z całym blokiem, do którego należy: " " kontekst, "-" usunięte, "+" dodane.

RIGHT wskazuje urządzenie: jeśli jest na liście ignorowanych, nic nie jest
porównywane ani wypisywane. Adres IP w nazwie pliku jest rozwiązywany
odwrotnie na potrzeby banera.

Przykłady:
  cfgdiff diff old/10.0.0.1 new/10.0.0.1
  cfgdiff diff r1.cfg r1.new.cfg --no-banner
  cfgdiff diff r1.cfg r1.new.cfg --group-words 3 --summary
        """,
    )
    p.add_argument("left", metavar="LEFT", help="Konfiguracja przed zmianą.")
    p.add_argument("right", metavar="RIGHT", help="Konfiguracja po zmianie (urządzenie docelowe).")
    p.add_argument(
        "--no-banner",
        action="store_true",
        help="Nie wypisuj banera urządzenia nad raportem.",
    )
    p.add_argument(
        "--ignore-file",
        metavar="PATH",
        default=None,
        help="Lista ignorowanych (domyślnie: $CFGDIFF_IGNORE_FILE lub /etc/cfgdiff/ignore).",
    )
    p.add_argument(
        "--group-words",
        metavar="N",
        type=positive_int,
        default=None,
        help="Liczba wspólnych pierwszych słów kolejnych linii tworzących grupę (domyślnie: 2).",
    )
    p.add_argument(
        "--blank-closes-section",
        action="store_true",
        default=None,
        help="Pusta linia kończy sekcję.",
    )
    p.add_argument(
        "--no-dns",
        action="store_true",
        help="Nie rozwiązuj odwrotnie adresu IP w banerze.",
    )
    p.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Kolorowe wyjście (domyślnie: auto).",
    )
    p.add_argument(
        "--summary",
        action="store_true",
        help="Wypisz liczbę hunków i linii po raporcie.",
    )
    p.set_defaults(func=run)
