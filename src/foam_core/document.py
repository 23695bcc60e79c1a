"""Document — a parsed dictionary file together with where it came from."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .config import ParseConfig, RenderConfig
from .errors import LookupFailure
from .getter import get_first_dict, get_first_value
from .model import Dictionary
from .parser import parse
from .writer import render

log = logging.getLogger("foam_core.document")

HEADER_KEY = "FoamFile"


@dataclass
class Document:
    """Holds the root Dictionary of one file."""

    root: Dictionary
    path: Path | None = None

    @classmethod
    def from_text(cls, text: str, config: ParseConfig | None = None) -> Document:
        return cls(parse(text, config))

    @classmethod
    def from_file(cls, path: Union[str, Path], config: ParseConfig | None = None) -> Document:
        path = Path(path)
        root = parse(path.read_text(encoding="utf-8"), config)
        log.debug("loaded %s (%d keys)", path, len(root))
        return cls(root, path)

    # -- Convenience accessors ------------------------------------------

    @property
    def header(self) -> Dictionary | None:
        """The ``FoamFile { ... }`` block, if the file has one."""
        try:
            return get_first_dict(self.root, HEADER_KEY)
        except LookupFailure:
            return None

    @property
    def object_name(self) -> str | None:
        header = self.header
        if header is None:
            return None
        try:
            return get_first_value(header, "object")
        except LookupFailure:
            return None

    # -- Output ---------------------------------------------------------

    def render(self, config: RenderConfig | None = None) -> str:
        return render(self.root, config)

    def write(self, path: Union[str, Path, None] = None, config: RenderConfig | None = None) -> Path:
        """Write the rendered text to *path*, or back to the source file."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Document has no source path; pass one to write()")
        target.write_text(self.render(config), encoding="utf-8")
        log.debug("wrote %s", target)
        return target
