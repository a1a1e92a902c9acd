from __future__ import annotations

import pytest

from objkit.core.errors import CoreError, InvalidArgumentError, SerializationError
from objkit.core.inspection import inspect, interpret, to_json


def test_interpret_should_map_none_and_booleans() -> None:
    assert interpret(None) == ""
    assert interpret(True) == "true"
    assert interpret(False) == "false"
    assert interpret(12) == "12"
    assert interpret("text") == "text"


def test_inspect_should_render_builtin_values() -> None:
    assert inspect("it's") == repr("it's")
    assert inspect(None) == "None"
    assert inspect((1, "a")) == "[1, 'a']"
    assert inspect({"k": [1]}) == "{'k': [1]}"


def test_inspect_should_delegate_to_inspect_method() -> None:
    class Custom:
        def inspect(self) -> str:
            return "#<Custom>"

    assert inspect(Custom()) == "#<Custom>"
    assert inspect([Custom()]) == "[#<Custom>]"
    assert inspect(Custom) == repr(Custom)


def test_to_json_should_wrap_encoder_errors() -> None:
    assert to_json({"a": [1, None]}) == '{"a": [1, null]}'
    with pytest.raises(SerializationError) as excinfo:
        to_json({1j})
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_error_hierarchy_should_share_base() -> None:
    assert issubclass(SerializationError, CoreError)
    assert issubclass(InvalidArgumentError, CoreError)
    assert issubclass(InvalidArgumentError, TypeError)


def test_to_json_should_reject_non_finite_floats() -> None:
    for bad in (float("nan"), float("inf")):
        with pytest.raises(SerializationError) as excinfo:
            to_json({"x": bad})
        assert isinstance(excinfo.value.__cause__, ValueError)
