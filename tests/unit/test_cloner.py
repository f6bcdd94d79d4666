"""Unit tests for copy_and_truncate_strings."""

from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import Any

import pytest

from capture_core import SanitizationDepthError, copy_and_truncate_strings, truncate_string


def _string_leaves(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, dict):
        return [leaf for item in value.values() for leaf in _string_leaves(item)]
    if isinstance(value, list):
        return [leaf for item in value for leaf in _string_leaves(item)]
    return []


class TestCopyAndTruncateStrings:
    """Tests for truncation, copying and cycle handling."""

    def test_truncates_objects(self, sample_properties) -> None:
        assert copy_and_truncate_strings(sample_properties, 5) == {
            "key": "value",
            5: "looon",
            "nested": {
                "keeeey": ["vaaaa", 1, 99999999999.4],
            },
        }

    def test_makes_a_copy(self, sample_properties) -> None:
        copy = copy_and_truncate_strings(sample_properties, 5)

        sample_properties["foo"] = "bar"

        assert copy != sample_properties
        assert "foo" not in copy

    def test_mutating_copy_leaves_input_untouched(self, sample_properties) -> None:
        copy = copy_and_truncate_strings(sample_properties, None)

        copy["nested"]["keeeey"].append("extra")
        copy["nested"]["new"] = True

        assert sample_properties["nested"] == {"keeeey": ["vaaaaaalue", 1, 99999999999.4]}
        assert copy["nested"] is not sample_properties["nested"]
        assert copy["nested"]["keeeey"] is not sample_properties["nested"]["keeeey"]

    def test_does_not_truncate_when_passed_none(self, sample_properties) -> None:
        assert copy_and_truncate_strings(sample_properties, None) == sample_properties

    def test_zero_length_empties_strings(self, sample_properties) -> None:
        result = copy_and_truncate_strings(sample_properties, 0)
        assert result == {"key": "", 5: "", "nested": {"keeeey": ["", 1, 99999999999.4]}}

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            copy_and_truncate_strings({"key": "value"}, -1)

    def test_handles_recursive_objects(self, recursive_properties) -> None:
        result = copy_and_truncate_strings(recursive_properties, 5)
        assert result == {"key": "vaaaa", "values": ["fooob", None]}

    def test_self_referencing_list(self) -> None:
        values: list[Any] = ["abcdefgh", 3]
        values.append(values)
        values.append(["nested-long", values])

        assert copy_and_truncate_strings(values, 3) == ["abc", 3, None, ["nes", None]]

    def test_handles_frozen_objects(self) -> None:
        original = MappingProxyType({"key": "vaaaaalue"})

        result = copy_and_truncate_strings(original, 5)

        assert result == {"key": "vaaaa"}
        assert isinstance(result, dict)
        result["other"] = 1
        assert "other" not in original

    def test_immutable_sequences_become_lists(self) -> None:
        payload = {"tags": ("alpha-long", "beta-long"), "queue": deque(["gamma-long"]), "ids": frozenset({1})}

        result = copy_and_truncate_strings(payload, 4)

        assert result == {"tags": ["alph", "beta"], "queue": ["gamm"], "ids": [1]}

    def test_shared_substructure_is_replaced_on_second_visit(self) -> None:
        shared = ["abc"]

        assert copy_and_truncate_strings({"a": shared, "b": shared}, None) == {"a": ["abc"]}
        assert copy_and_truncate_strings([shared, shared], None) == [["abc"], None]

    def test_repeated_calls_do_not_share_state(self, recursive_properties) -> None:
        first = copy_and_truncate_strings(recursive_properties, 5)
        second = copy_and_truncate_strings(recursive_properties, 5)

        assert first == second
        assert first is not second

    def test_non_string_leaves_pass_through(self) -> None:
        marker = object()
        payload = {"flag": True, "empty": None, "count": 7, "ratio": 0.5, "blob": b"raw-bytes", "obj": marker}

        result = copy_and_truncate_strings(payload, 2)

        assert result["obj"] is marker
        assert result["blob"] == b"raw-bytes"
        assert result["flag"] is True
        assert result["empty"] is None

    def test_primitive_roots(self) -> None:
        assert copy_and_truncate_strings("abcdef", 2) == "ab"
        assert copy_and_truncate_strings(42, 2) == 42
        assert copy_and_truncate_strings(None, 2) is None

    def test_every_string_respects_limit(self) -> None:
        payload = {
            "a" * 20: ["x" * 50, {"deep": ["y" * 9, "short"]}],
            "list": [["z" * 12], "w" * 7],
        }

        result = copy_and_truncate_strings(payload, 6)

        leaves = _string_leaves(result)
        assert leaves
        assert all(len(leaf) <= 6 for leaf in leaves)

    def test_excessive_depth_raises_depth_error(self) -> None:
        node: list[Any] = []
        for _ in range(50_000):
            node = [node]

        with pytest.raises(SanitizationDepthError) as exc_info:
            copy_and_truncate_strings(node, 10)

        assert exc_info.value.code == "DEPTH_EXCEEDED"
        assert isinstance(exc_info.value.__cause__, RecursionError)


@pytest.mark.parametrize(
    ("value", "limit", "expected"),
    [
        ("hello", None, "hello"),
        ("hello", 10, "hello"),
        ("hello", 3, "hel"),
        ("hello", 0, ""),
    ],
)
def test_truncate_string(value: str, limit: int | None, expected: str) -> None:
    assert truncate_string(value, limit) == expected
