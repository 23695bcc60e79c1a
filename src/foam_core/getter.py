"""Lookup helpers over a parsed tree.

Every failure raises a subclass of ``LookupFailure`` (itself a
``LookupError``), so callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from .errors import NoDictValues, NoSuchKey, NoSuchValue, NotADictionary, NotAValue
from .model import Dictionary, Dimension, List, Node, Value

N = TypeVar("N", Dictionary, Value, List, Dimension)


def get(node: Node, key: str) -> tuple[Node, ...]:
    """Return every value attributed to *key*.

    - *node* must be a Dictionary, else NotADictionary
    - *key* must exist, else NoSuchKey
    """
    if not isinstance(node, Dictionary):
        raise NotADictionary(node)
    try:
        return node.entries[key]
    except KeyError:
        raise NoSuchKey(key) from None


def get_first(node: Node, key: str) -> Node:
    values = get(node, key)
    if not values:
        raise NoDictValues(key)
    return values[0]


def first_of(values: Iterable[Node], kind: type[N], key: str | None = None) -> N:
    """Return the first element of *values* that is a *kind* node."""
    for value in values:
        if isinstance(value, kind):
            return value
    raise NoSuchValue(key, kind)


def get_first_value(node: Node, key: str) -> str:
    """Text of the first Value under *key*, skipping lists and dictionaries."""
    return first_of(get(node, key), Value, key).text


def get_first_list(node: Node, key: str) -> tuple[Node, ...]:
    """Elements of the first List under *key*."""
    return first_of(get(node, key), List, key).items


def get_first_dict(node: Node, key: str) -> Dictionary:
    return first_of(get(node, key), Dictionary, key)


def get_first_dimension(node: Node, key: str) -> tuple[str, ...]:
    return first_of(get(node, key), Dimension, key).items


def get_path(node: Node, path: str, sep: str = "/") -> tuple[Node, ...]:
    """Walk nested dictionaries: ``"solvers/p/tolerance"``.

    Every segment but the last descends into the first Dictionary
    attributed to that key.
    """
    *parents, last = path.split(sep)
    for segment in parents:
        node = get_first_dict(node, segment)
    return get(node, last)


def as_text(node: Node) -> str:
    if not isinstance(node, Value):
        raise NotAValue(node)
    return node.text
