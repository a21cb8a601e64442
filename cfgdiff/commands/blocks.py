"""Komenda: cfgdiff blocks — struktura bloków rozpoznana w pliku."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cfgdiff._settings import positive_int
from config_model import BlockForest, InputError, NormalizedDocument
from config_parser import describe_block, normalize, parse_blocks, read_config

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wyjście terminala
# ---------------------------------------------------------------------------

def _show_table(doc: NormalizedDocument, forest: BlockForest) -> None:
    if not forest.roots:
        console.print("[yellow]No blocks found.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("DEPTH", justify="right", no_wrap=True, style="dim")
    table.add_column("KIND",  no_wrap=True, style="bold cyan")
    table.add_column("LINES", justify="center", no_wrap=True)
    table.add_column("SIZE",  justify="right", no_wrap=True)
    table.add_column("LABEL", no_wrap=False, max_width=60)

    for block in forest.walk():
        indent = "  " * block.depth
        first = doc[block.start].source_index + 1
        last = doc[block.stop - 1].source_index + 1
        table.add_row(
            str(block.depth),
            indent + block.kind,
            f"{first}–{last}",
            str(len(block)),
            escape(describe_block(block, doc)[:80]),
        )

    loose = sum(1 for b in forest.innermost if b is None)
    console.print()
    console.print(table)
    console.print(
        f"  [dim]{len(forest)} block(s), {len(doc)} line(s), "
        f"{loose} outside any block, {len(doc.comments)} comment(s)[/dim]\n"
    )


# ---------------------------------------------------------------------------
# Logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        options = args.settings.parse_options(args.group_words, args.blank_closes_section)
    except ValueError as exc:
        err_console.print(f"[red]Invalid option:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    try:
        text = read_config(args.file)
    except InputError as exc:
        err_console.print(f"[red]Input error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    doc = normalize(text, options)
    _show_table(doc, parse_blocks(doc, options))


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "blocks",
        help="Pokazuje sekcje i grupy rozpoznane w pliku konfiguracji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje jeden plik konfiguracji i wypisuje jego bloki: sekcje (linia
nagłówka z głębiej wciętym ciałem) i grupy (kolejne linie o wspólnych
pierwszych słowach). Pokazuje, z jakim kontekstem wypisana byłaby zmiana.

Przykłady:
  cfgdiff blocks router1.cfg
  cfgdiff blocks router1.cfg --group-words 3
        """,
    )
    p.add_argument("file", metavar="FILE", help="Plik konfiguracji.")
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
    p.set_defaults(func=run)
