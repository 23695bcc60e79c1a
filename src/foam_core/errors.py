"""Exception hierarchy for Foam Core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Structure
    from .tokenizer import Token


class FoamError(Exception):
    """Base class for every error raised by Foam Core."""


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

class ScanError(FoamError):
    """A span of input that matches none of the token shapes."""

    def __init__(self, fragment: str, start: int, end: int, line: int, column: int) -> None:
        self.fragment = fragment
        self.start = start
        self.end = end
        self.line = line
        self.column = column
        super().__init__(
            f"cannot scan {_preview(fragment)} at line {line}, column {column}"
            f" (offset {start}..{end})"
        )

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end


# ---------------------------------------------------------------------------
# Structural errors
# ---------------------------------------------------------------------------

class ParseError(FoamError):
    """The token sequence does not form a valid dictionary file."""


class EndOfContent(ParseError):
    """Input ended inside an open structure, or the scanner failed."""

    def __init__(self, structure: Structure | None = None, position: int | None = None) -> None:
        self.structure = structure
        self.position = position
        where = f" inside {structure.value}" if structure is not None else ""
        at = f" at offset {position}" if position is not None else ""
        super().__init__(f"unexpected end of content{where}{at}")


class UnexpectedToken(ParseError):
    def __init__(self, token: Token, structure: Structure) -> None:
        self.token = token
        self.structure = structure
        super().__init__(
            f"unexpected {token.describe()} in {structure.value}"
            f" at line {token.line}, column {token.column}"
        )


class MissingKeyword(ParseError):
    """A key was required but another token occupies its place."""

    def __init__(self, token: Token) -> None:
        self.token = token
        self.span = (token.start, token.end)
        super().__init__(
            f"expected a keyword, found {token.describe()}"
            f" at line {token.line}, column {token.column}"
            f" (offset {token.start}..{token.end})"
        )


class InvalidDictEnd(ParseError):
    """A ``}`` with no open dictionary to close."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(
            f"'}}' without a matching '{{' at line {token.line}, column {token.column}"
        )


class DuplicateKey(ParseError):
    def __init__(self, token: Token) -> None:
        self.token = token
        self.key = token.value
        super().__init__(
            f"key {token.value!r} declared twice in the same dictionary"
            f" (line {token.line}, column {token.column})"
        )


# ---------------------------------------------------------------------------
# Lookup errors
# ---------------------------------------------------------------------------

class LookupFailure(FoamError, LookupError):
    """Base for accessor failures; always recoverable by the caller."""


class NotADictionary(LookupFailure):
    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"{type(node).__name__} is not a Dictionary")


class NotAValue(LookupFailure):
    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"{type(node).__name__} is not a Value")


class NoSuchKey(LookupFailure):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"no such key: {key!r}")


class NoSuchValue(LookupFailure):
    def __init__(self, key: str | None, kind: type) -> None:
        self.key = key
        self.kind = kind
        owner = f" for key {key!r}" if key is not None else ""
        super().__init__(f"no {kind.__name__}{owner}")


class NoDictValues(LookupFailure, ParseError):
    """A committed key carries an empty value sequence.

    Raised by lookups and by strict parsing, so it belongs to both
    families.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"key {name!r} has no values")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class RenderError(FoamError):
    """The tree holds something the text format cannot express."""


def _preview(fragment: str, limit: int = 20) -> str:
    if len(fragment) > limit:
        fragment = fragment[:limit] + "..."
    return repr(fragment)
