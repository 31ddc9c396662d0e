import numpy as np
from boolean_function import BooleanFunction
from errors import InvalidArgumentError

"""
Walsh-Hadamard transform and its inverse, following the butterflies of
  A. Joux, "Algorithmic Cryptanalysis", Algorithms 9.3 and 9.4.
"""


def signed_table(function: BooleanFunction) -> np.ndarray:
    # The (-1)^f(x) encoding: 0 -> +1, 1 -> -1.
    return 1 - 2 * function.values.astype(np.int64)


def walsh_transform(function: BooleanFunction) -> np.ndarray:
    """
    Return W, with W[a] = sum over x of (-1)^(f(x) XOR a.x), as an int64 array of length 2^n.
    W[0] = 2^n - 2 * wt(f); it is zero exactly when f is balanced.
    """
    spectrum = np.empty(function.size, dtype=np.int64)
    spectrum[:] = signed_table(function)
    return _sum_diff_butterfly(spectrum, function.variable_count, halve=False)


def inverse_walsh_transform(function: BooleanFunction) -> np.ndarray:
    """
    Same butterfly as walsh_transform, but every stage halves both outputs, so the net scaling is 1/2^n.
    Seeded from the +/-1 table of f the result is W / 2^n and is generally fractional, hence float64.
    """
    values = np.empty(function.size, dtype=np.float64)
    values[:] = signed_table(function)
    return _sum_diff_butterfly(values, function.variable_count, halve=True)


def inverse_walsh_spectrum(spectrum, variable_count: int) -> np.ndarray:
    """
    Apply the halving butterfly to a Walsh spectrum of a function of 'variable_count' variables.
    For W = walsh_transform(f) this reconstructs the +/-1 table of f exactly.
    """
    if variable_count < 1:
        raise InvalidArgumentError(f"Variable count must be at least 1, got {variable_count}.")
    size_total = 1 << variable_count
    source = np.asarray(spectrum)
    if source.ndim != 1 or source.size != size_total:
        raise InvalidArgumentError(
            f"Expected a spectrum of length {size_total} for {variable_count} variables, got shape {source.shape}.")
    if not np.issubdtype(source.dtype, np.integer):
        raise InvalidArgumentError(f"Walsh spectrum must hold integers, got dtype {source.dtype}.")

    values = np.empty(size_total, dtype=np.int64)
    values[:] = source
    return _sum_diff_butterfly(values, variable_count, halve=True)


def _sum_diff_butterfly(values: np.ndarray, variable_count: int, halve: bool) -> np.ndarray:
    # Stage i replaces every pair (v[p+j], v[p+size+j]) with (sum, diff), size = 2^i.
    integer_work = np.issubdtype(values.dtype, np.integer)
    for stage in range(variable_count):
        size = 1 << stage
        blocks = values.reshape(-1, 2, size)
        low = blocks[:, 0, :].copy()
        high = blocks[:, 1, :]
        total = low + high
        diff = low - high
        if halve:
            if integer_work:
                if np.any(total & 1) or np.any(diff & 1):
                    raise InvalidArgumentError(
                        f"Odd intermediate value at stage {stage}: input is not a Walsh spectrum.")
                total >>= 1
                diff >>= 1
            else:
                total /= 2
                diff /= 2
        blocks[:, 0, :] = total
        blocks[:, 1, :] = diff
    return values
