"""
test_formatters.py - value → golden text

DoD:
- default: pretty JSON in insertion order; compact fallback never raises
- method / callable dispatch
- exclusion formatter rejects non-mappings
- build_formatter rejects conflicting specs
"""

import json
from collections.abc import Mapping

import pytest

from golden_match.core.formatters import (
    CallableFormatter,
    DefaultFormatter,
    ExcludingJsonFormatter,
    Formatter,
    MethodFormatter,
    build_formatter,
    serialize_json,
)
from golden_match.domain.errors import ErrorCodes, GoldenConfigurationError


class Report:
    def __init__(self, lines: list[str]):
        self.lines = lines

    def to_text(self) -> str:
        return "\n".join(self.lines)

    def line_count(self) -> int:
        return len(self.lines)


class FrozenMapping(Mapping):
    """Read-only mapping that json.dumps does not accept."""

    def __init__(self, data: dict):
        self._data = dict(data)

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


# =============================================================================
# serialize_json
# =============================================================================

class TestSerializeJson:
    """serialize_json tests."""

    def test_pretty_insertion_order(self, sample_structs: dict):
        text = serialize_json(sample_structs)
        assert text == (
            '{\n'
            '  "fox": [\n'
            '    "quick",\n'
            '    "brown"\n'
            '  ],\n'
            '  "dog": "lazy"\n'
            '}'
        )

    def test_scalar(self):
        assert serialize_json(1) == "1"
        assert serialize_json("quick brown fox") == '"quick brown fox"'

    def test_non_ascii_kept(self):
        assert serialize_json({"name": "홍길동"}) == '{\n  "name": "홍길동"\n}'

    def test_unserializable_leaf_falls_back_to_compact(self):
        value = {"when": object()}
        text = serialize_json(value)
        assert text.startswith('{"when":"<object object at')
        assert "\n" not in text

    def test_mixed_key_types(self):
        text = serialize_json({1: "a", "b": 2})
        assert json.loads(text) == {"1": "a", "b": 2}

    def test_circular_reference_falls_back_to_repr(self):
        value: list = []
        value.append(value)
        assert serialize_json(value) == "[[...]]"

    def test_deterministic(self, sample_structs: dict):
        assert serialize_json(sample_structs) == serialize_json(dict(sample_structs))

    def test_keys_not_reordered(self):
        assert list(json.loads(serialize_json({"z": 1, "b": 2}))) == ["z", "b"]


# =============================================================================
# Formatter variants
# =============================================================================

class TestFormatters:
    """Formatter variant tests."""

    def test_default(self, sample_structs: dict):
        assert DefaultFormatter().format(sample_structs) == serialize_json(sample_structs)

    def test_method(self):
        assert MethodFormatter("to_text").format(Report(["a", "b"])) == "a\nb"

    def test_method_result_converted_to_text(self):
        assert MethodFormatter("line_count").format(Report(["a", "b"])) == "2"

    def test_method_missing_rejected(self):
        with pytest.raises(GoldenConfigurationError) as exc_info:
            MethodFormatter("to_text").validate(42)
        assert exc_info.value.code == ErrorCodes.FORMATTER_NOT_FOUND

    def test_callable(self, sample_structs: dict):
        def my_formatter(value):
            return f"custom format:\n---\n{value}\n---"

        text = CallableFormatter(my_formatter).format(sample_structs)
        assert text == "custom format:\n---\n{'fox': ['quick', 'brown'], 'dog': 'lazy'}\n---"

    def test_excluding_json(self, volatile_record: dict):
        text = ExcludingJsonFormatter({"a"}).format(volatile_record)
        assert json.loads(text) == {"b": {"c": [{}, {"d": 4}]}}

    def test_excluding_json_without_exclusions(self, sample_structs: dict):
        assert ExcludingJsonFormatter().format(sample_structs) == serialize_json(sample_structs)

    def test_excluding_json_keeps_surviving_key_order(self):
        text = ExcludingJsonFormatter({"a"}).format({"z": 1, "a": 0, "b": 2})
        assert list(json.loads(text)) == ["z", "b"]

    def test_excluding_json_plain_mapping(self):
        """Non-dict mappings serialize as JSON even with nothing excluded."""
        value = FrozenMapping({"x": 1, "items": (FrozenMapping({"y": 2}),)})
        text = ExcludingJsonFormatter().format(value)

        assert json.loads(text) == {"x": 1, "items": [{"y": 2}]}
        assert text == ExcludingJsonFormatter().format(value)
        assert "object at" not in text

    @pytest.mark.parametrize("value", [[{"a": 1}], "text", 3, None])
    def test_excluding_json_rejects_non_mapping(self, value):
        with pytest.raises(GoldenConfigurationError) as exc_info:
            ExcludingJsonFormatter({"a"}).validate(value)
        assert exc_info.value.code == ErrorCodes.NOT_A_MAPPING


# =============================================================================
# build_formatter
# =============================================================================

class TestBuildFormatter:
    """build_formatter tests."""

    def test_none_is_default(self):
        assert isinstance(build_formatter(), DefaultFormatter)

    def test_string_is_method(self):
        formatter = build_formatter("to_text")
        assert isinstance(formatter, MethodFormatter)
        assert formatter.name == "to_text"

    def test_callable(self):
        assert isinstance(build_formatter(str), CallableFormatter)

    def test_format_fn(self):
        formatter = build_formatter(format_fn=str)
        assert isinstance(formatter, CallableFormatter)

    def test_instance_kept(self):
        formatter = ExcludingJsonFormatter({"id"})
        assert build_formatter(formatter) is formatter

    def test_conflict_rejected(self):
        with pytest.raises(GoldenConfigurationError) as exc_info:
            build_formatter("to_text", format_fn=str)
        assert exc_info.value.code == ErrorCodes.FORMATTER_CONFLICT

    def test_unsupported_rejected(self):
        with pytest.raises(GoldenConfigurationError) as exc_info:
            build_formatter(True)
        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_FORMATTER

    def test_formatter_is_abstract(self):
        with pytest.raises(TypeError):
            Formatter()
