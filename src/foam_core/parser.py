"""Tree builder: recursive descent over the scanner's token stream.

Three productions share one scanner:

- ``_parse_dictionary`` for the root and every ``{ ... }`` scope
- ``_parse_list`` for ``( ... )``
- ``_parse_dimension`` for ``[ ... ]``

Comments are skipped by ``_next``, so no production ever sees one.
Nesting depth is bounded by Python's recursion limit.
"""

from __future__ import annotations

import logging
from os import PathLike
from typing import Union

from .config import DEFAULT_PARSE_CONFIG, DuplicateKeyPolicy, ParseConfig
from .errors import (
    DuplicateKey,
    EndOfContent,
    InvalidDictEnd,
    MissingKeyword,
    NoDictValues,
    ScanError,
    UnexpectedToken,
)
from .model import Dictionary, Dimension, List, Node, Structure, Value
from .tokenizer import COMMENT_TYPES, Scanner, Token, TokenType

log = logging.getLogger("foam_core.parser")


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: Union[str, bytes], config: ParseConfig | None = None) -> Dictionary:
    """Parse dictionary text and return the root Dictionary.

    Either the whole input parses or an error is raised; there are no
    partial trees. Every error raised here is a ``ParseError``; with
    ``config.strict`` that includes ``NoDictValues``, which is also a
    ``LookupFailure``.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    builder = _TreeBuilder(Scanner(text), config or DEFAULT_PARSE_CONFIG)
    root = builder.parse_root()
    log.debug("parsed %d characters into %d root keys", len(text), len(root))
    return root


def parse_file(path: Union[str, PathLike], config: ParseConfig | None = None) -> Dictionary:
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    log.debug("read %s", path)
    return parse(text, config)


# ---------------------------------------------------------------------------
# Per-scope accumulator
# ---------------------------------------------------------------------------

class _Scope:
    """Collects committed (key, values) pairs for one dictionary."""

    def __init__(self, config: ParseConfig) -> None:
        self._config = config
        self._entries: dict[str, list[Node]] = {}

    def commit(self, key: Token, values: list[Node]) -> None:
        if not values and self._config.strict:
            raise NoDictValues(key.value)

        name = key.value
        if name not in self._entries:
            self._entries[name] = values
            return

        policy = self._config.duplicate_keys
        log.debug("key %r redeclared at line %d (%s)", name, key.line, policy.value)
        if policy is DuplicateKeyPolicy.REJECT:
            raise DuplicateKey(key)
        if policy is DuplicateKeyPolicy.LAST_WINS:
            # Re-insert so the key moves to its latest declaration.
            del self._entries[name]
            self._entries[name] = values
        elif policy is DuplicateKeyPolicy.MERGE:
            self._entries[name] = _merge_values(self._entries[name], values)
        # FIRST_WINS: keep what we have

    def build(self) -> Dictionary:
        return Dictionary(self._entries)


def _merge_values(old: list[Node], new: list[Node]) -> list[Node]:
    """Concatenate two value sequences of one key.

    Two dictionary attributions (``k { ... } k { ... }``) fold into a
    single Dictionary, key by key, with the same rule applied inside.
    """
    if (
        len(old) == 1 and len(new) == 1
        and isinstance(old[0], Dictionary) and isinstance(new[0], Dictionary)
    ):
        return [_merge_dictionaries(old[0], new[0])]
    return [*old, *new]


def _merge_dictionaries(old: Dictionary, new: Dictionary) -> Dictionary:
    entries = {key: list(values) for key, values in old.items()}
    for key, values in new.items():
        if key in entries:
            entries[key] = _merge_values(entries[key], list(values))
        else:
            entries[key] = list(values)
    return Dictionary(entries)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class _TreeBuilder:
    def __init__(self, scanner: Scanner, config: ParseConfig) -> None:
        self._scanner = scanner
        self._config = config

    def parse_root(self) -> Dictionary:
        return self._parse_dictionary(nested=False)

    # -- Token access ---------------------------------------------------------

    def _next(self, structure: Structure | None) -> Token | None:
        """Next non-comment token, or None at end of input."""
        try:
            for token in self._scanner:
                if token.type not in COMMENT_TYPES:
                    return token
        except ScanError as exc:
            raise EndOfContent(structure, exc.start) from exc
        return None

    # -- Productions ----------------------------------------------------------

    def _parse_dictionary(self, nested: bool) -> Dictionary:
        """Parse attributions until ``}`` (nested) or end of input (root).

        ``key`` is None while no attribution is pending; otherwise it is
        the key token and ``values`` accumulates that key's values.
        """
        scope = _Scope(self._config)
        key: Token | None = None
        values: list[Node] = []

        while True:
            token = self._next(Structure.DICTIONARY if nested else None)

            if token is None:
                if nested:
                    raise EndOfContent(Structure.DICTIONARY, self._scanner.position)
                # The root forgives a missing ';' on the last attribution.
                if key is not None:
                    scope.commit(key, values)
                return scope.build()

            kind = token.type

            if key is None:
                if kind is TokenType.KEYWORD:
                    key, values = token, []
                elif kind is TokenType.DICT_END:
                    if not nested:
                        raise InvalidDictEnd(token)
                    return scope.build()
                elif kind in (TokenType.DICT_START, TokenType.LIST_START, TokenType.END):
                    raise UnexpectedToken(token, Structure.DICTIONARY)
                else:
                    raise MissingKeyword(token)
                continue

            if kind is TokenType.KEYWORD:
                values.append(Value(token.value))
            elif kind is TokenType.LIST_START:
                values.append(self._parse_list())
            elif kind is TokenType.DIMENSION_START:
                values.append(self._parse_dimension())
            elif kind is TokenType.DICT_START:
                opens_attribution = not values
                values.append(self._parse_dictionary(nested=True))
                if opens_attribution:
                    # `key { ... }` needs no ';'
                    scope.commit(key, values)
                    key = None
            elif kind is TokenType.END:
                scope.commit(key, values)
                key = None
            elif kind is TokenType.DICT_END:
                if not nested:
                    raise InvalidDictEnd(token)
                scope.commit(key, values)
                return scope.build()
            else:
                raise UnexpectedToken(token, Structure.DICTIONARY)

    def _parse_list(self) -> List:
        items: list[Node] = []
        while True:
            token = self._next(Structure.LIST)
            if token is None:
                raise EndOfContent(Structure.LIST, self._scanner.position)

            kind = token.type
            if kind is TokenType.LIST_END:
                return List(items)
            if kind is TokenType.KEYWORD:
                items.append(Value(token.value))
            elif kind is TokenType.LIST_START:
                items.append(self._parse_list())
            elif kind is TokenType.DICT_START:
                items.append(self._parse_dictionary(nested=True))
            elif kind is TokenType.DIMENSION_START:
                items.append(self._parse_dimension())
            else:
                raise UnexpectedToken(token, Structure.LIST)

    def _parse_dimension(self) -> Dimension:
        items: list[str] = []
        while True:
            token = self._next(Structure.DIMENSION)
            if token is None:
                raise EndOfContent(Structure.DIMENSION, self._scanner.position)
            if token.type is TokenType.DIMENSION_END:
                return Dimension(items)
            if token.type is not TokenType.KEYWORD:
                raise UnexpectedToken(token, Structure.DIMENSION)
            items.append(token.value)
