# tests/base/validator/test_check_mixed.py
import pytest

from shape_assert.base.exceptions import InvalidCheckError, InvalidDescriptorError
from shape_assert.base.kinds import UNDEFINED, kind_of
from shape_assert.base.result import CheckResult
from shape_assert.base.validator import check_mixed

from tests.base.conftest import NUMERIC_ENUM, Color, Status, is_even

SAMPLE_VALUES = [
    0,
    1.5,
    -3,
    True,
    False,
    "text",
    "",
    None,
    UNDEFINED,
    [1, 2],
    {"a": 1},
    {1, 2},
    object(),
    len,
    lambda x: x,
]

PRIMITIVE_DESCRIPTORS = ["number", "boolean", "object", "function", "undefined"]


# --- Primitive kinds ---


@pytest.mark.parametrize("descriptor", PRIMITIVE_DESCRIPTORS)
@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_check_mixed_primitive_matches_kind(value, descriptor):
    """A non-string descriptor passes exactly when the runtime kind matches."""
    result = check_mixed(value, descriptor)
    assert result.ok is (kind_of(value) == descriptor)
    if not result.ok:
        assert result.error == (
            f"expected is {descriptor}, actual is {kind_of(value)}"
        )


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_check_mixed_string_accepts_everything(value):
    assert check_mixed(value, "string") == CheckResult(True)


@pytest.mark.parametrize("descriptor", PRIMITIVE_DESCRIPTORS + ["string"])
def test_check_mixed_optional_accepts_nullish(descriptor):
    assert check_mixed(None, descriptor + "?").ok
    assert check_mixed(UNDEFINED, descriptor + "?").ok


def test_check_mixed_optional_checks_present_values():
    assert check_mixed(5, "number?").ok
    ok, err = check_mixed("5", "number?")
    assert ok is False
    assert err == "expected is number, actual is string"


def test_check_mixed_none_is_object():
    assert check_mixed(None, "object").ok
    assert check_mixed(None, "number").error == "expected is number, actual is object"


def test_check_mixed_absent_is_undefined():
    assert check_mixed(UNDEFINED, "number").error == (
        "expected is number, actual is undefined"
    )


# --- Containers ---


def test_check_mixed_array_success():
    assert check_mixed([1, 2, 3], "array<number>").ok


def test_check_mixed_array_reports_index():
    ok, err = check_mixed([1, 2, "x"], "array<number>")
    assert ok is False
    assert "[2]" in err
    assert "expected is number" in err
    assert err == "[2] expected is number, actual is string"


@pytest.mark.parametrize(
    "descriptor", ["array<number>", "Array<number>", "MAP<number>", "set<number>"]
)
def test_check_mixed_container_kind_does_not_change_algorithm(descriptor):
    assert check_mixed([1, 2], descriptor).ok
    assert check_mixed({"a": 1}, descriptor).ok
    assert check_mixed({"a": "b"}, descriptor).error == (
        "[a] expected is number, actual is string"
    )


def test_check_mixed_optional_container():
    assert check_mixed(None, "array<number>?").ok
    assert check_mixed(UNDEFINED, "array<number>?").ok
    assert check_mixed([True], "array<boolean>?").ok


def test_check_mixed_unsupported_container_kind():
    ok, err = check_mixed([1], "list<number>")
    assert ok is False
    assert err == "unsupported container type list"


def test_check_mixed_container_of_non_iterable():
    assert check_mixed(42, "array<number>").error == "is not iterables type"
    assert check_mixed("abc", "array<string>").error == "is not iterables type"


def test_check_mixed_container_with_enum_and_predicate():
    assert check_mixed([1, 2, 1], "array<number>", Color).ok
    assert check_mixed([1, 7], "array<number>", Color).error == (
        "[1] expected is number, actual is 7"
    )
    assert check_mixed([2, 4], "array<even>", is_even).ok
    assert check_mixed([2, 3], "array<even>", is_even).error == "[1] expected is even"


def test_check_mixed_nested_container_is_rejected():
    with pytest.raises(InvalidDescriptorError):
        check_mixed([[1]], "array<array<number>>")


# --- Checks ---


def test_check_mixed_enum():
    assert check_mixed(1, "number", NUMERIC_ENUM).ok
    ok, err = check_mixed(3, "number", NUMERIC_ENUM)
    assert ok is False
    assert err == "expected is number, actual is 3"


def test_check_mixed_enum_class():
    assert check_mixed("active", "Status", Status).ok
    assert check_mixed(Status.ACTIVE, "Status", Status).ok
    assert check_mixed("unknown", "Status", Status).error == (
        "expected is Status, actual is unknown"
    )


def test_check_mixed_optional_enum():
    assert check_mixed(None, "number?", Color).ok
    assert not check_mixed(9, "number?", Color).ok


def test_check_mixed_predicate():
    assert check_mixed(4, "custom", is_even).ok
    ok, err = check_mixed(3, "custom", is_even)
    assert ok is False
    assert err == "expected is custom"


def test_check_mixed_predicate_receives_raw_value():
    received = []
    value = {"nested": [1]}

    def predicate(v):
        received.append(v)
        return True

    assert check_mixed(value, "custom", predicate).ok
    assert received == [value]
    assert received[0] is value


def test_check_mixed_predicate_overrides_string_leniency():
    assert not check_mixed(1, "string", lambda v: isinstance(v, str)).ok


def test_check_mixed_invalid_check():
    with pytest.raises(InvalidCheckError):
        check_mixed(1, "number", 42)


def test_check_mixed_is_idempotent():
    value = (1, 2, "x")
    first = check_mixed(value, "array<number>")
    second = check_mixed(value, "array<number>")
    assert first == second
    assert check_mixed(7, "number") == check_mixed(7, "number")
