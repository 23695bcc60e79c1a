"""Tests for foam_core.tokenizer."""

import pytest

from foam_core.errors import ScanError
from foam_core.tokenizer import Scanner, TokenType, tokenize


def types(text, **kwargs):
    return [t.type for t in tokenize(text, **kwargs)]


def values(text, **kwargs):
    return [t.value for t in tokenize(text, **kwargs)]


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

def test_attribution_tokens():
    assert types("key value;") == [TokenType.KEYWORD, TokenType.KEYWORD, TokenType.END]


def test_bare_keywords_accept_numbers_and_paths():
    text = "2.0 -1 1e-05 $var #include system/fvSchemes a_b"
    assert values(text) == ["2.0", "-1", "1e-05", "$var", "#include", "system/fvSchemes", "a_b"]
    assert set(types(text)) == {TokenType.KEYWORD}


def test_quoted_keyword_strips_quotes():
    tokens = tokenize('"a b" 1;')
    assert tokens[0].type is TokenType.KEYWORD
    assert tokens[0].value == "a b"
    assert tokens[0].span == (0, 5)


def test_quoted_keyword_may_be_empty():
    assert values('""') == [""]


def test_quoted_keyword_keeps_delimiters():
    assert values('"(U|k) {x};"') == ["(U|k) {x};"]


def test_keyword_stops_before_comment():
    tokens = tokenize("a/b//c")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.KEYWORD, "a/b"),
        (TokenType.COMMENT, "//c"),
    ]


# ---------------------------------------------------------------------------
# Structural tokens
# ---------------------------------------------------------------------------

def test_punctuation():
    assert types("{ } ( ) [ ] ;") == [
        TokenType.DICT_START,
        TokenType.DICT_END,
        TokenType.LIST_START,
        TokenType.LIST_END,
        TokenType.DIMENSION_START,
        TokenType.DIMENSION_END,
        TokenType.END,
    ]


def test_punctuation_needs_no_spaces():
    assert values("a(1 2);b{c d;}") == ["a", "(", "1", "2", ")", ";", "b", "{", "c", "d", ";", "}"]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def test_line_comment_runs_to_newline():
    tokens = tokenize("a // note\nb")
    assert [t.type for t in tokens] == [TokenType.KEYWORD, TokenType.COMMENT, TokenType.KEYWORD]
    assert tokens[1].value == "// note"


def test_multiline_comment():
    tokens = tokenize("/* one\ntwo */ a")
    assert tokens[0].type is TokenType.MULTILINE_COMMENT
    assert tokens[0].value == "/* one\ntwo */"
    assert tokens[1].value == "a"


def test_multiline_comment_does_not_nest():
    tokens = tokenize("/* this /* is */ comment */")
    assert tokens[0].value == "/* this /* is */"
    assert tokens[1].type is TokenType.KEYWORD
    assert tokens[1].value == "comment"


def test_tokenize_without_comments():
    assert types("a /* x */ b // y", comments=False) == [TokenType.KEYWORD, TokenType.KEYWORD]


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_unterminated_multiline_comment():
    with pytest.raises(ScanError) as info:
        tokenize("a /* never closed")
    assert info.value.fragment == "/* never closed"
    assert info.value.span == (2, 17)


def test_unterminated_quote():
    with pytest.raises(ScanError) as info:
        tokenize('a "open')
    assert info.value.fragment == '"open'
    assert info.value.start == 2


def test_form_feed_is_not_whitespace():
    with pytest.raises(ScanError) as info:
        tokenize("a \f b")
    assert info.value.fragment == "\f"
    assert info.value.span == (2, 3)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class TestScanner:
    def test_is_lazy(self):
        scanner = Scanner("a b")
        first = next(scanner)
        assert first.value == "a"
        assert scanner.position == 1

    def test_exhausts_at_end(self):
        scanner = Scanner("a  \n")
        assert [t.value for t in scanner] == ["a"]
        assert scanner.position == 4
        with pytest.raises(StopIteration):
            next(scanner)

    def test_line_and_column(self):
        tokens = tokenize("a;\n  b;")
        b = tokens[2]
        assert (b.line, b.column) == (2, 3)
        assert b.start == 5

    def test_line_tracking_across_comments(self):
        tokens = tokenize("/* x\ny\n*/ a")
        assert (tokens[1].line, tokens[1].column) == (3, 4)

    def test_error_reports_line(self):
        with pytest.raises(ScanError) as info:
            list(Scanner('a;\nb "x'))
        assert (info.value.line, info.value.column) == (2, 3)
