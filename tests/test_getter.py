"""Tests for lookup access."""

import pytest

from foam_core import parse
from foam_core.errors import (
    LookupFailure,
    NoDictValues,
    NoSuchKey,
    NoSuchValue,
    NotADictionary,
    NotAValue,
)
from foam_core.getter import (
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
from foam_core.model import Dictionary, List, Value


def test_get_dict():
    root = parse("var value;")
    assert get(root, "var") == (Value("value"),)


def test_get_no_dict():
    root = parse("var ( 1 2 3 );")
    level1 = get(root, "var")
    with pytest.raises(NotADictionary):
        get(level1[0], "1")


def test_get_no_key():
    root = parse("var value;")
    with pytest.raises(NoSuchKey) as info:
        get(root, "value")
    assert info.value.key == "value"


def test_get_first():
    root = parse("var (1) 2;")
    assert get_first(root, "var") == List((Value("1"),))


def test_get_first_of_empty_sequence():
    root = parse("var;")
    with pytest.raises(NoDictValues):
        get_first(root, "var")


def test_get_first_value():
    root = parse("var (1) 2;")
    assert get_first_value(root, "var") == "2"


def test_get_first_value_missing():
    root = parse("var (1) (2);")
    with pytest.raises(NoSuchValue) as info:
        get_first_value(root, "var")
    assert info.value.key == "var"
    assert info.value.kind is Value


def test_get_first_list():
    root = parse("var 1 2 ( 3 4 );")
    assert get_first_list(root, "var") == (Value("3"), Value("4"))


def test_get_first_dict():
    root = parse("outer x { a 1; };")
    assert get_first_dict(root, "outer") == Dictionary({"a": (Value("1"),)})


def test_get_first_dimension():
    root = parse("dimensions [0 1 -1 0 0 0 0];")
    assert get_first_dimension(root, "dimensions") == ("0", "1", "-1", "0", "0", "0", "0")


def test_first_of():
    values = (List((Value("1"),)), Value("2"))
    assert first_of(values, Value) == Value("2")
    assert first_of(values, List) == values[0]
    with pytest.raises(NoSuchValue):
        first_of(values, Dictionary)


class TestGetPath:
    root = parse("solvers { p { tolerance 1e-06; } U { tolerance 1e-05; } }")

    def test_walks_nested_dictionaries(self):
        assert get_path(self.root, "solvers/p/tolerance") == (Value("1e-06"),)

    def test_single_segment(self):
        assert len(get_path(self.root, "solvers")) == 1

    def test_custom_separator(self):
        assert get_path(self.root, "solvers.U.tolerance", sep=".") == (Value("1e-05"),)

    def test_missing_segment(self):
        with pytest.raises(NoSuchKey):
            get_path(self.root, "solvers/k/tolerance")

    def test_segment_without_dictionary(self):
        with pytest.raises(NoSuchValue):
            get_path(self.root, "solvers/p/tolerance/x")


def test_as_text():
    assert as_text(Value("a")) == "a"
    with pytest.raises(NotAValue):
        as_text(List())


def test_dictionary_methods():
    root = parse("var 1 2 ( 3 4 ); d { a b; }")
    assert root.get("var")[0] == Value("1")
    assert root.get_first("var") == Value("1")
    assert root.get_first_value("var") == "1"
    assert root.get_first_list("var") == (Value("3"), Value("4"))
    assert root.get_first_dict("d").get_first_value("a") == "b"
    assert root.get_path("d/a") == (Value("b"),)


def test_failures_are_lookup_errors():
    root = parse("a 1;")
    with pytest.raises(LookupError):
        root.get("missing")
    for exc in (NotADictionary, NotAValue, NoSuchKey, NoSuchValue, NoDictValues):
        assert issubclass(exc, LookupFailure)
