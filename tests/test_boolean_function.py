import numpy as np
import pickle
import pytest
from boolean_function import BooleanFunction
from errors import DomainError, InvalidArgumentError


def test_from_bits_string_reads_f0_first():
    function = BooleanFunction.from_bits("0111", 2)
    assert function.variable_count == 2
    assert function.size == 4
    assert [function.bit(x) for x in range(4)] == [0, 1, 1, 1]


def test_from_int_uses_bit_set_encoding(x1_function):
    assert [x1_function.bit(x) for x in range(4)] == [0, 1, 0, 1]
    assert x1_function.to_bit_string() == "0101"


def test_accepts_lists_bools_and_arrays():
    a = BooleanFunction.from_bits([0, 1, 1, 0], 2)
    b = BooleanFunction.from_bits([False, True, True, False], 2)
    c = BooleanFunction.from_bits(np.array([0, 1, 1, 0], dtype=np.int32), 2)
    assert a == b == c
    assert hash(a) == hash(c)


def test_extra_bits_are_ignored():
    function = BooleanFunction.from_bits("01101111", 2)
    assert function.to_bit_string() == "0110"
    assert function == BooleanFunction.from_bits("0110", 2)


@pytest.mark.parametrize("bits, variable_count", [
    ("010", 2),
    ("01", 0),
    ("01", -1),
    ("0120", 2),
    ([0, 1, 2, 1], 2),
    ([0.0, 1.0], 1),
    ([[0, 1], [1, 0]], 2),
])
def test_invalid_construction(bits, variable_count):
    with pytest.raises(InvalidArgumentError):
        BooleanFunction.from_bits(bits, variable_count)


@pytest.mark.parametrize("value, variable_count", [
    (3, 1.5),
    (3, "2"),
    (3, 0),
    (3, True),
    (-1, 2),
    (2.0, 2),
    ("0101", 2),
])
def test_invalid_from_int(value, variable_count):
    with pytest.raises(InvalidArgumentError):
        BooleanFunction.from_int(value, variable_count)


def test_from_int_accepts_numpy_integers():
    assert BooleanFunction.from_int(np.int64(0b1010), np.int64(2)) == BooleanFunction.from_int(0b1010, 2)


def test_invalid_construction_is_a_value_error():
    with pytest.raises(ValueError):
        BooleanFunction.from_bits("0", 1)


@pytest.mark.parametrize("index", [-1, 4, 100, 1.5, "1"])
def test_bit_out_of_range(x1_function, index):
    with pytest.raises(DomainError):
        x1_function.bit(index)


def test_bit_accepts_numpy_integers(x1_function):
    assert x1_function.bit(np.int64(3)) == 1


def test_function_is_immutable(x1_function):
    with pytest.raises(AttributeError):
        x1_function.variable_count = 3
    with pytest.raises(ValueError):
        x1_function.values[0] = 1
    assert x1_function.to_bit_string() == "0101"


def test_truth_table_is_a_fresh_copy(x1_function):
    table = x1_function.truth_table
    table[0] = 1
    assert x1_function.bit(0) == 0


def test_pickle_round_trip(majority3):
    restored = pickle.loads(pickle.dumps(majority3))
    assert restored == majority3
    assert restored.variable_count == 3
