"""Foam Core — parser, lookup and renderer for simulation case dictionaries."""

from .config import DuplicateKeyPolicy, ParseConfig, RenderConfig
from .document import Document
from .errors import (
    DuplicateKey,
    EndOfContent,
    FoamError,
    InvalidDictEnd,
    LookupFailure,
    MissingKeyword,
    NoDictValues,
    NoSuchKey,
    NoSuchValue,
    NotADictionary,
    NotAValue,
    ParseError,
    RenderError,
    ScanError,
    UnexpectedToken,
)
from .getter import (
    as_text,
    first_of,
    get,
    get_first,
    get_first_dict,
    get_first_dimension,
    get_first_list,
    get_first_value,
    get_path,
)
from .model import Dictionary, Dimension, List, Node, Structure, Value
from .parser import parse, parse_file
from .tokenizer import Scanner, Token, TokenType, tokenize
from .writer import needs_quotes, quote, render

__all__ = [
    "parse",
    "parse_file",
    "render",
    "needs_quotes",
    "quote",
    "Document",
    "Dictionary",
    "Dimension",
    "List",
    "Node",
    "Structure",
    "Value",
    "Scanner",
    "Token",
    "TokenType",
    "tokenize",
    "ParseConfig",
    "RenderConfig",
    "DuplicateKeyPolicy",
    "get",
    "get_first",
    "get_first_value",
    "get_first_list",
    "get_first_dict",
    "get_first_dimension",
    "get_path",
    "first_of",
    "as_text",
    "FoamError",
    "ScanError",
    "ParseError",
    "EndOfContent",
    "UnexpectedToken",
    "MissingKeyword",
    "InvalidDictEnd",
    "DuplicateKey",
    "LookupFailure",
    "NotADictionary",
    "NotAValue",
    "NoSuchKey",
    "NoSuchValue",
    "NoDictValues",
    "RenderError",
]
