import pytest

from clags.exceptions import InvalidValueError
from clags.parser import ValueKind, ValueList
from clags.parser.value_list import INITIAL_CAPACITY


def test_value_list_starts_empty():
    values = ValueList()
    assert values.count == 0
    assert values.capacity == 0
    assert len(values) == 0
    assert values == []
    assert values.kind is None


def test_value_list_growth_doubles():
    values = ValueList(ValueKind.UINT8)
    values.append_token("n", "1", ValueKind.UINT8)
    assert values.capacity == INITIAL_CAPACITY == 8

    for number in range(2, 9):
        values.append_token("n", str(number), ValueKind.UINT8)
    assert values.count == 8
    assert values.capacity == 8

    values.append_token("n", "9", ValueKind.UINT8)
    assert values.count == 9
    assert values.capacity == 16
    assert values == list(range(1, 10))


def test_value_list_failed_append_keeps_earlier_items():
    values = ValueList()
    values.append_token("n", "1", ValueKind.INT8)
    values.append_token("n", "2", ValueKind.INT8)
    with pytest.raises(InvalidValueError):
        values.append_token("n", "300", ValueKind.INT8)
    assert values == [1, 2]
    assert values.kind is ValueKind.INT8


def test_value_list_sequence_protocol():
    values = ValueList()
    for token in ("a", "b", "c"):
        values.append_token("files", token)
    assert values[0] == "a"
    assert values[-1] == "c"
    assert values[1:] == ["b", "c"]
    assert list(values) == ["a", "b", "c"]
    assert "b" in values
    assert values.items == ["a", "b", "c"]
    assert values == ("a", "b", "c")


def test_value_list_release():
    values = ValueList()
    values.append("x")
    values.release()
    assert values.count == 0
    assert values.capacity == 0


def test_value_list_repr():
    values = ValueList(ValueKind.STRING)
    values.append("x")
    assert repr(values) == "ValueList(kind=string, count=1, capacity=8, items=['x'])"
