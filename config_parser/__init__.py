"""
config_parser — od surowego tekstu konfiguracji do lasu bloków.

Interfejs publiczny:
    ParseOptions   — szerokość grupy, granica pustej linii, znaczniki komentarzy
    normalize      — surowy tekst → NormalizedDocument (bez komentarzy i pustych)
    read_config    — plik → tekst, rzuca InputError
    decode         — bajty → tekst, rzuca InputError
    parse_blocks   — NormalizedDocument → BlockForest
    describe_block — etykieta bloku do wyświetlenia

Typowe użycie:
    from config_parser import normalize, parse_blocks

    doc    = normalize(read_config("router1.cfg"))
    forest = parse_blocks(doc)
    for block in forest.walk():
        print(block.depth, block.kind, describe_block(block, doc))
"""

from .options import ParseOptions, DEFAULT_GROUP_WORDS
from .normalizer import normalize, read_config, decode
from .structure import parse_blocks, describe_block

__all__ = [
    "ParseOptions",
    "DEFAULT_GROUP_WORDS",
    "normalize",
    "read_config",
    "decode",
    "parse_blocks",
    "describe_block",
]
