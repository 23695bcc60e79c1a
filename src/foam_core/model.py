"""Tree data model produced by the parser.

Every node is immutable once built. Text is copied out of the input
while scanning, so a tree never keeps the source string alive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence, Union


class Structure(Enum):
    """Which production was open when an error was raised."""

    DICTIONARY = "dictionary"
    LIST = "list"
    DIMENSION = "dimension"


# ---------------------------------------------------------------------------
# Leaf nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Value:
    """A single keyword token (quotes already stripped)."""

    text: str

    def __str__(self) -> str:
        from .writer import render
        return render(self)


@dataclass(frozen=True)
class Dimension:
    """Bracketed tuple such as ``[0 1 -1 0 0 0 0]``."""

    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        from .writer import render
        return render(self)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class List:
    """Parenthesised sequence of nodes; order is significant."""

    items: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Node:
        return self.items[index]

    def __str__(self) -> str:
        from .writer import render
        return render(self)


@dataclass(frozen=True)
class Dictionary:
    """Keyed attributions; each key maps to its ordered value sequence.

    ``entries`` is a read-only mapping in declaration order. Keys are
    unique within one dictionary.
    """

    entries: Mapping[str, tuple[Node, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {key: tuple(values) for key, values in self.entries.items()}
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Sequence[Node]]]) -> Dictionary:
        return cls(dict(pairs))

    # -- Mapping-ish protocol ---------------------------------------------

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def __hash__(self) -> int:
        # Equality ignores key order, so the hash must too.
        return hash(frozenset(self.entries.items()))

    def __repr__(self) -> str:
        return f"Dictionary({dict(self.entries)!r})"

    def __str__(self) -> str:
        from .writer import render
        return render(self)

    # -- Accessors (see getter.py) -------------------------------------------

    def get(self, key: str) -> tuple[Node, ...]:
        from .getter import get
        return get(self, key)

    def get_first(self, key: str) -> Node:
        from .getter import get_first
        return get_first(self, key)

    def get_first_value(self, key: str) -> str:
        from .getter import get_first_value
        return get_first_value(self, key)

    def get_first_list(self, key: str) -> tuple[Node, ...]:
        from .getter import get_first_list
        return get_first_list(self, key)

    def get_first_dict(self, key: str) -> Dictionary:
        from .getter import get_first_dict
        return get_first_dict(self, key)

    def get_path(self, path: str, sep: str = "/") -> tuple[Node, ...]:
        from .getter import get_path
        return get_path(self, path, sep)


Node = Union[Dictionary, Value, List, Dimension]
