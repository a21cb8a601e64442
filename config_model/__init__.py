"""
config_model — struktury danych wspólne dla parsera, differa i CLI.

Użycie:
  from config_model import NormalizedDocument, Block, BlockForest, ...

Moduły:
  lines   — Line, NormalizedDocument
  blocks  — BlockKind, Block, BlockForest
  changes — ChangeKind, Side, EntryKind, ChangeRegion, ContextWindow,
            DiffEntry, Hunk, DiffResult
  errors  — ErrorCode, CfgDiffError, InputError
"""

from .lines import Line, NormalizedDocument
from .blocks import BlockKind, Block, BlockForest
from .changes import (
    ChangeKind,
    Side,
    EntryKind,
    ChangeRegion,
    ContextWindow,
    DiffEntry,
    Hunk,
    DiffResult,
)
from .errors import ErrorCode, CfgDiffError, InputError

__all__ = [
    # lines
    "Line",
    "NormalizedDocument",
    # blocks
    "BlockKind",
    "Block",
    "BlockForest",
    # changes
    "ChangeKind",
    "Side",
    "EntryKind",
    "ChangeRegion",
    "ContextWindow",
    "DiffEntry",
    "Hunk",
    "DiffResult",
    # errors
    "ErrorCode",
    "CfgDiffError",
    "InputError",
]
