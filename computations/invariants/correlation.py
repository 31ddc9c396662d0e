import numpy as np
from boolean_function import BooleanFunction
from errors import DimensionMismatchError


def correlation(f: BooleanFunction, g: BooleanFunction) -> float:
    """
    Correlation (agreements - disagreements) / 2^n between two functions of the same variable count.
    The result lies in [-1, 1]; 1 means f == g and -1 means f == g XOR 1.
    """
    if f.variable_count != g.variable_count:
        raise DimensionMismatchError(
            f"Cannot correlate functions of {f.variable_count} and {g.variable_count} variables.")

    disagreements = int(np.count_nonzero(f.values != g.values))
    return (f.size - 2 * disagreements) / f.size
