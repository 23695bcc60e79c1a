"""Options for parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DuplicateKeyPolicy(Enum):
    """What happens when a key is declared twice in one dictionary."""

    LAST_WINS = "last_wins"    # later declaration replaces the earlier one
    FIRST_WINS = "first_wins"  # later declaration is dropped
    MERGE = "merge"            # later values are appended to the sequence
    REJECT = "reject"          # raise DuplicateKey


@dataclass(frozen=True)
class ParseConfig:
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    strict: bool = False  # reject keys committed with no values


@dataclass(frozen=True)
class RenderConfig:
    indent: int = 4
    inline_lists: bool = True  # lists holding only values stay on one line

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")


DEFAULT_PARSE_CONFIG = ParseConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()
