from __future__ import annotations

from objkit.config.models import QueryStringConfig
from objkit.lang.hash import Hash
from objkit.lang.query import to_query_params


def test_to_query_params_should_parse_repeated_and_bare_keys() -> None:
    assert to_query_params("a=1&b=2&b=3&c") == {"a": "1", "b": ["2", "3"], "c": None}


def test_to_query_params_should_strip_prefix_and_fragment() -> None:
    assert to_query_params("?a=1&b=2#section") == {"a": "1", "b": "2"}


def test_to_query_params_should_return_empty_dict_for_empty_input() -> None:
    assert to_query_params("") == {}
    assert to_query_params("?") == {}


def test_to_query_params_should_decode_components() -> None:
    assert to_query_params("full%20name=Jane%20Doe&q=a%26b%3Dc") == {
        "full name": "Jane Doe",
        "q": "a&b=c",
    }
    assert to_query_params("plus=a+b") == {"plus": "a+b"}


def test_to_query_params_should_keep_empty_values() -> None:
    assert to_query_params("a=&b") == {"a": "", "b": None}


def test_to_query_params_should_honor_separator() -> None:
    assert to_query_params("a=1;a=2", separator=";") == {"a": ["1", "2"]}


def test_query_string_should_round_trip_through_hash() -> None:
    source = {
        "name": "Jane Doe",
        "symbols": "&=?/#%",
        "count": 3,
        "tags": ["x y", "z"],
        "flag": None,
    }
    parsed = to_query_params(Hash(source).to_query_string())
    assert parsed == {
        "name": "Jane Doe",
        "symbols": "&=?/#%",
        "count": "3",
        "tags": ["x y", "z"],
        "flag": None,
    }


def test_query_string_should_round_trip_with_custom_separator() -> None:
    config = QueryStringConfig(separator=";")
    encoded = Hash({"a": "x;y", "b": ["1;2", "3"]}).to_query_string(config)
    assert encoded == "a=x%3By;b=1%3B2;b=3"
    assert to_query_params(encoded, separator=";") == {"a": "x;y", "b": ["1;2", "3"]}
