"""Scanner: turns dictionary text into a lazy stream of tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .errors import ScanError


class TokenType(Enum):
    KEYWORD = auto()
    COMMENT = auto()
    MULTILINE_COMMENT = auto()
    DICT_START = auto()
    DICT_END = auto()
    LIST_START = auto()
    LIST_END = auto()
    DIMENSION_START = auto()
    DIMENSION_END = auto()
    END = auto()


COMMENT_TYPES = frozenset({TokenType.COMMENT, TokenType.MULTILINE_COMMENT})

_PUNCTUATION = {
    "{": TokenType.DICT_START,
    "}": TokenType.DICT_END,
    "(": TokenType.LIST_START,
    ")": TokenType.LIST_END,
    "[": TokenType.DIMENSION_START,
    "]": TokenType.DIMENSION_END,
    ";": TokenType.END,
}


_SKIP_RE = re.compile(r"[ \t\n\r]+")

_TOKEN_RE = re.compile(
    r"""
    (?P<multiline_comment>/\*.*?\*/)         # first */ closes, no nesting
    |(?P<comment>//[^\n]*)                   # up to (not including) newline
    |"(?P<quoted>[^"]*)"                     # quotes stripped, spaces kept
    |(?P<keyword>(?:[^\s{}()\[\];"/]|/(?![/*]))+)
    |(?P<punct>[{}()\[\];])
    """,
    re.VERBOSE | re.DOTALL,
)

_RUN_RE = re.compile(r"[^ \t\n\r]+")


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    start: int
    end: int
    line: int = 1
    column: int = 1

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    def describe(self) -> str:
        if self.type is TokenType.KEYWORD:
            return f"keyword {self.value!r}"
        if self.type in COMMENT_TYPES:
            return "comment"
        return repr(self.value)


class Scanner:
    """Pull-based token iterator over a complete input text.

    The only state is the cursor; to rescan, build a new Scanner over
    the same text.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0
        self._line = 1
        self._line_start = 0

    @property
    def position(self) -> int:
        """Offset of the next character to scan."""
        return self._pos

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        text = self.text
        skip = _SKIP_RE.match(text, self._pos)
        if skip:
            self._advance_to(skip.end())
        if self._pos >= len(text):
            raise StopIteration

        start = self._pos
        line, column = self._line, start - self._line_start + 1
        m = _TOKEN_RE.match(text, start)
        if m is None:
            self._fail(start, line, column)

        kind = m.lastgroup
        if kind == "quoted":
            token = Token(TokenType.KEYWORD, m.group("quoted"), start, m.end(), line, column)
        elif kind == "keyword":
            token = Token(TokenType.KEYWORD, m.group(), start, m.end(), line, column)
        elif kind == "punct":
            token = Token(_PUNCTUATION[m.group()], m.group(), start, m.end(), line, column)
        elif kind == "comment":
            token = Token(TokenType.COMMENT, m.group(), start, m.end(), line, column)
        else:
            token = Token(TokenType.MULTILINE_COMMENT, m.group(), start, m.end(), line, column)

        self._advance_to(m.end())
        return token

    # -- Internals ----------------------------------------------------------

    def _advance_to(self, end: int) -> None:
        newlines = self.text.count("\n", self._pos, end)
        if newlines:
            self._line += newlines
            self._line_start = self.text.rindex("\n", self._pos, end) + 1
        self._pos = end

    def _fail(self, start: int, line: int, column: int) -> None:
        text = self.text
        if text.startswith(("/*", '"'), start):
            # Unterminated comment or quote swallows the rest of the input.
            end = len(text)
        else:
            end = _RUN_RE.match(text, start).end()
        raise ScanError(text[start:end], start, end, line, column)


def tokenize(text: str, *, comments: bool = True) -> list[Token]:
    """Scan *text* eagerly. Comments are dropped when *comments* is False."""
    return [
        token for token in Scanner(text)
        if comments or token.type not in COMMENT_TYPES
    ]
