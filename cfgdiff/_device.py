"""
cfgdiff/_device.py — do kogo należy porównywana konfiguracja.

Plik docelowy (prawy) wskazuje urządzenie: wprost nazwą pliku albo
zawartym w niej adresem IP, który na potrzeby banera raportu zamieniany
jest na nazwę hosta przez odwrotny DNS.

  read_ignore_list(path)       → zbiór identyfikatorów urządzeń do pominięcia
  is_ignored(target, entries)  → dokładne dopasowanie ścieżki lub nazwy pliku
  find_address(name)           → pierwszy adres IPv4/IPv6 w nazwie pliku
  device_name(target, resolve) → nazwa hosta, adres albo nazwa pliku
  banner(device)               → linie nagłówka wypisywane nad raportem
"""

from __future__ import annotations

import ipaddress
import logging
import re
import socket
from pathlib import Path

logger = logging.getLogger(__name__)

BANNER_WIDTH = 72

_IPV4_RE = re.compile(r"(?<![\d.])(\d{1,3}(?:\.\d{1,3}){3})(?!\d)")
_IPV6_TOKEN_RE = re.compile(r"[0-9A-Fa-f:]*:[0-9A-Fa-f:]*")


# ---------------------------------------------------------------------------
# Lista ignorowanych
# ---------------------------------------------------------------------------

def read_ignore_list(path: Path) -> set[str]:
    """Jeden identyfikator na linię; puste linie i komentarze "#" są pomijane.

    Brak pliku oznacza pustą listę.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("no ignore list at %s", path)
        return set()
    entries = set()
    for raw in text.splitlines():
        entry = raw.strip()
        if entry and not entry.startswith("#"):
            entries.add(entry)
    logger.debug("loaded %d ignore entr(ies) from %s", len(entries), path)
    return entries


def is_ignored(target: str, entries: set[str]) -> bool:
    return target in entries or Path(target).name in entries


# ---------------------------------------------------------------------------
# Nazwa urządzenia
# ---------------------------------------------------------------------------

def find_address(name: str) -> str | None:
    for match in _IPV4_RE.finditer(name):
        if _valid_ip(match.group(1)):
            return match.group(1)
    for match in _IPV6_TOKEN_RE.finditer(name):
        token = match.group()
        if token.count(":") >= 2 and _valid_ip(token):
            return token
    return None


def device_name(target: str, resolve: bool = True) -> str:
    """
    Nazwa pokazywana w banerze.

    Kolejność:
      1. odwrotny DNS adresu znalezionego w nazwie pliku (resolve=True)
      2. sam adres (nieudane zapytanie albo resolve=False)
      3. nazwa pliku, gdy nie zawiera adresu
    """
    name = Path(target).name
    address = find_address(name)
    if address is None:
        return name
    if not resolve:
        return address
    try:
        host, _aliases, _addresses = socket.gethostbyaddr(address)
    except (OSError, UnicodeError) as exc:
        logger.debug("reverse lookup of %s failed: %s", address, exc)
        return address
    return host


def banner(device: str) -> list[str]:
    return [f"Configuration changes for {device}", "=" * BANNER_WIDTH]


def _valid_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True
