"""Render a tree back to dictionary text.

The output re-parses to an equal tree; it does not reproduce the
original layout or comments.
"""

from __future__ import annotations

from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .errors import RenderError
from .model import Dictionary, Dimension, List, Node, Value

# Characters that force a keyword to be quoted.
NEED_QUOTE = " \t\r\n(){}[];*\""


def needs_quotes(text: str) -> bool:
    if not text:
        return True
    # The scanner skips only space, tab, LF and CR; any other whitespace
    # outside quotes is a scan failure.
    if any(char in NEED_QUOTE or char.isspace() for char in text):
        return True
    return "//" in text or "/*" in text


def quote(text: str) -> str:
    """Return *text* as a keyword token, quoted only when needed."""
    if '"' in text:
        raise RenderError(f"cannot render text containing a double quote: {text!r}")
    if needs_quotes(text):
        return f'"{text}"'
    return text


def render(node: Node, config: RenderConfig | None = None) -> str:
    """Render *node* as text.

    A Dictionary renders as a file body (no surrounding braces); any
    other node renders as it would appear after a key.
    """
    r = _Renderer(config or DEFAULT_RENDER_CONFIG)
    if isinstance(node, Dictionary):
        lines = r.dictionary_body(node, 0)
        return "\n".join(lines) + "\n" if lines else ""
    return "\n".join(r.element(node, 0))


class _Renderer:
    def __init__(self, config: RenderConfig) -> None:
        self.config = config

    def pad(self, level: int) -> str:
        return " " * (self.config.indent * level)

    # -- Dictionaries -------------------------------------------------------

    def dictionary_body(self, node: Dictionary, level: int) -> list[str]:
        lines: list[str] = []
        for key, values in node.items():
            lines.extend(self.entry(key, values, level))
        return lines

    def entry(self, key: str, values: tuple[Node, ...], level: int) -> list[str]:
        pad = self.pad(level)
        if len(values) == 1 and isinstance(values[0], Dictionary):
            return [pad + quote(key), *self.braced(values[0], level)]
        if values and isinstance(values[0], Dictionary):
            raise RenderError(
                f"key {key!r}: a dictionary followed by more values cannot be rendered"
            )

        lines = [pad + quote(key)]
        for value in values:
            inline = self.inline(value)
            if inline is not None:
                lines[-1] += " " + inline
            else:
                lines.extend(self.element(value, level))
        lines[-1] += ";"
        return lines

    def braced(self, node: Dictionary, level: int) -> list[str]:
        pad = self.pad(level)
        return [pad + "{", *self.dictionary_body(node, level + 1), pad + "}"]

    # -- Values, lists, dimensions -------------------------------------------

    def inline(self, node: Node) -> str | None:
        """Single-line form of *node*, or None if it needs a block."""
        if isinstance(node, Value):
            return quote(node.text)
        if isinstance(node, Dimension):
            return "[" + " ".join(quote(item) for item in node.items) + "]"
        if (
            isinstance(node, List)
            and self.config.inline_lists
            and all(isinstance(item, Value) for item in node.items)
        ):
            return "(" + " ".join(quote(item.text) for item in node.items) + ")"
        return None

    def element(self, node: Node, level: int) -> list[str]:
        inline = self.inline(node)
        if inline is not None:
            return [self.pad(level) + inline]
        if isinstance(node, Dictionary):
            return self.braced(node, level)
        pad = self.pad(level)
        lines = [pad + "("]
        for item in node.items:
            lines.extend(self.element(item, level + 1))
        lines.append(pad + ")")
        return lines
