"""Tests for the closed parameter type set (core/types.py).

Every test is a pure function call.  Coverage:

* Display tokens used in usage lines
* Parse rules, including hex, exponent and case-insensitive booleans
* Parse failures raising ``InvalidArgumentValueError``
* Validate predicates used for default-value checking
"""

from __future__ import annotations

import pytest

from taskschema.core.types import ParamType
from taskschema.exceptions import InvalidArgumentValueError


class TestDisplayName:
    @pytest.mark.parametrize(
        ("param_type", "token"),
        [
            (ParamType.STRING, "STRING"),
            (ParamType.BOOLEAN, "BOOLEAN"),
            (ParamType.INT, "INT"),
            (ParamType.FLOAT, "FLOAT"),
            (ParamType.JSON, "JSON"),
        ],
    )
    def test_uppercase_token(self, param_type: ParamType, token: str) -> None:
        assert param_type.display_name == token

    def test_closed_set(self) -> None:
        assert len(ParamType) == 5


class TestParse:
    def test_string_is_verbatim(self) -> None:
        assert ParamType.STRING.parse("name", " a b ") == " a b "

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("FALSE", False), ("True", True)])
    def test_boolean(self, raw: str, expected: bool) -> None:
        assert ParamType.BOOLEAN.parse("flag", raw) is expected

    def test_boolean_rejects_other_words(self) -> None:
        with pytest.raises(InvalidArgumentValueError) as exc_info:
            ParamType.BOOLEAN.parse("flag", "yes")
        assert exc_info.value.param_name == "flag"
        assert exc_info.value.type_name == "boolean"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("42", 42), ("0x1F", 31), ("1e3", 1000), ("123456789012345678901234567890", 123456789012345678901234567890)],
    )
    def test_int(self, raw: str, expected: int) -> None:
        assert ParamType.INT.parse("count", raw) == expected

    @pytest.mark.parametrize("raw", ["1.5", "-3", "abc", ""])
    def test_int_rejects(self, raw: str) -> None:
        with pytest.raises(InvalidArgumentValueError):
            ParamType.INT.parse("count", raw)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1.5", 1.5), (".5", 0.5), ("2.", 2.0), ("1e2", 100.0), ("0x10", 16.0)],
    )
    def test_float(self, raw: str, expected: float) -> None:
        assert ParamType.FLOAT.parse("ratio", raw) == expected

    @pytest.mark.parametrize("raw", ["nan", "1.2.3", "."])
    def test_float_rejects(self, raw: str) -> None:
        with pytest.raises(InvalidArgumentValueError):
            ParamType.FLOAT.parse("ratio", raw)

    def test_json(self) -> None:
        assert ParamType.JSON.parse("data", '{"a": [1, null]}') == {"a": [1, None]}

    def test_json_rejects_malformed(self) -> None:
        with pytest.raises(InvalidArgumentValueError) as exc_info:
            ParamType.JSON.parse("data", "{")
        assert exc_info.value.value == "{"


class TestValidate:
    def test_string(self) -> None:
        assert ParamType.STRING.validate("x")
        assert not ParamType.STRING.validate(1)

    def test_boolean(self) -> None:
        assert ParamType.BOOLEAN.validate(False)
        assert not ParamType.BOOLEAN.validate(0)

    def test_int_excludes_bool(self) -> None:
        assert ParamType.INT.validate(3)
        assert not ParamType.INT.validate(True)
        assert not ParamType.INT.validate(1.5)

    def test_float_accepts_int(self) -> None:
        assert ParamType.FLOAT.validate(1)
        assert ParamType.FLOAT.validate(1.5)
        assert not ParamType.FLOAT.validate("1.5")

    def test_json_accepts_anything(self) -> None:
        assert ParamType.JSON.validate(None)
        assert ParamType.JSON.validate({"a": 1})
