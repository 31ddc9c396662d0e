import numpy as np
from boolean_function import BooleanFunction
from registry import REG

"""
Difference distribution table of a single-output Boolean function, following
  A. Joux, "Algorithmic Cryptanalysis", Algorithm 9.1.
"""


def ddt_table(function: BooleanFunction) -> np.ndarray:
    """
    Compute the DDT as a (2^n, 2) int64 array.
    table[delta][b] counts the inputs x with f(x) XOR f(x XOR delta) = b, so every row sums to 2^n
    and row 0 is (2^n, 0).
    """
    size = function.size
    values = function.values
    inputs = np.arange(size)
    table = np.zeros((size, 2), dtype=np.int64)

    # Rows are independent of each other.
    for delta in range(size):
        output_diff = values ^ values[inputs ^ delta]
        table[delta] = np.bincount(output_diff, minlength=2)
    return table


REG.register("table", "ddt", ddt_table)
