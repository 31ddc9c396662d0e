from __future__ import annotations
import operator
from typing import Sequence, Union
import galois
import numpy as np
from errors import DomainError, InvalidArgumentError

BitSource = Union[str, Sequence[int], np.ndarray]


class BooleanFunction:
    """
    Immutable single-output Boolean function f: GF(2)^n -> GF(2), stored as its truth table.
    Entry x of the table is f(x), and bit j of x is the value of variable j+1.
    """

    __slots__ = ("_values", "_variable_count")

    def __init__(self, bits: BitSource, variable_count: int):
        variable_count = _check_variable_count(variable_count)
        size = 1 << variable_count
        values = _bits_to_array(bits)
        if values.size < size:
            raise InvalidArgumentError(
                f"A function of {variable_count} variables needs {size} bits, got {values.size}.")

        # Only the first 2^n entries are kept. Anything past them is never read.
        table = np.array(values[:size], dtype=np.uint8)
        table.flags.writeable = False

        object.__setattr__(self, "_values", table)
        object.__setattr__(self, "_variable_count", variable_count)

    @classmethod
    def from_bits(cls, bits: BitSource, variable_count: int) -> "BooleanFunction":
        return cls(bits, variable_count)

    @classmethod
    def from_int(cls, value: int, variable_count: int) -> "BooleanFunction":
        # Bit-set encoding: bit x of 'value' is f(x). Example: 0b1010 means f(1) = f(3) = 1.
        variable_count = _check_variable_count(variable_count)
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
            raise InvalidArgumentError(f"Bit-set value must be a non-negative integer, got {value!r}.")
        value = int(value)
        size = 1 << variable_count
        bits = [(value >> x) & 1 for x in range(size)]
        return cls(bits, variable_count)

    def __setattr__(self, name, value):
        raise AttributeError("BooleanFunction is immutable.")

    def __delattr__(self, name):
        raise AttributeError("BooleanFunction is immutable.")

    def __reduce__(self):
        # Rebuild through the constructor so worker processes get a validated copy.
        return (self.__class__, (self.to_bit_string(), self._variable_count))

    @property
    def variable_count(self) -> int:
        return self._variable_count

    @property
    def size(self) -> int:
        return 1 << self._variable_count

    @property
    def values(self) -> np.ndarray:
        # Read-only view of the truth table as 0/1 integers.
        return self._values

    @property
    def truth_table(self) -> galois.FieldArray:
        # A fresh GF(2) copy that the caller may modify freely.
        return galois.GF2(self._values, copy=True)

    def bit(self, x: int) -> int:
        try:
            index = operator.index(x)
        except TypeError:
            raise DomainError(f"Input index must be an integer, got {x!r}.") from None
        if index < 0 or index >= self.size:
            raise DomainError(f"Input index {index} is outside [0, {self.size}).")
        return int(self._values[index])

    def to_bit_string(self) -> str:
        # f(0) first, the same order the line parser accepts.
        return "".join("1" if value else "0" for value in self._values)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other):
        if not isinstance(other, BooleanFunction):
            return NotImplemented
        return (self._variable_count == other._variable_count
                and np.array_equal(self._values, other._values))

    def __hash__(self):
        return hash((self._variable_count, self._values.tobytes()))

    def __repr__(self):
        table_str = self.to_bit_string()
        if len(table_str) > 64:
            table_str = table_str[:61] + "..."
        return f"BooleanFunction(variable_count={self._variable_count}, table='{table_str}')"


def _check_variable_count(variable_count) -> int:
    if isinstance(variable_count, bool) or not isinstance(variable_count, (int, np.integer)):
        raise InvalidArgumentError(f"Variable count must be an integer, got {variable_count!r}.")
    variable_count = int(variable_count)
    if variable_count < 1:
        raise InvalidArgumentError(f"Variable count must be at least 1, got {variable_count}.")
    return variable_count


def _bits_to_array(bits: BitSource) -> np.ndarray:
    # Normalise every accepted bit source into a flat integer array and check it only holds 0/1.
    if isinstance(bits, str):
        if any(char not in "01" for char in bits):
            raise InvalidArgumentError("Bit string may only contain '0' and '1'.")
        return np.array([int(char) for char in bits], dtype=np.uint8)

    try:
        values = np.asarray(bits)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Cannot read bits from {type(bits).__name__}: {exc}") from exc

    if values.ndim != 1:
        raise InvalidArgumentError(f"Bits must form a flat sequence, got shape {values.shape}.")
    if values.size == 0:
        return values.astype(np.uint8)
    if values.dtype == np.bool_:
        return values.astype(np.uint8)
    if not np.issubdtype(values.dtype, np.integer):
        raise InvalidArgumentError(f"Bits must be integers or booleans, got dtype {values.dtype}.")
    if np.any((values != 0) & (values != 1)):
        raise InvalidArgumentError("Bits may only take the values 0 and 1.")
    return values.astype(np.uint8)
