import galois
import numpy as np
from boolean_function import BooleanFunction
from computations.transforms.walsh import signed_table, walsh_transform
from errors import InvalidArgumentError
from registry import REG

LAT_METHODS = ("direct", "walsh")


def parity_matrix(variable_count: int) -> galois.FieldArray:
    """
    Return the 2^n x 2^n GF(2) matrix whose entry (a, x) is the dot product a.x mod 2,
    computed as the product of the input bit matrix with its transpose over GF(2).
    """
    inputs = np.arange(1 << variable_count)
    input_bits = galois.GF2(((inputs[:, None] >> np.arange(variable_count)) & 1).astype(np.uint8))
    return input_bits @ input_bits.T


def lat_table(function: BooleanFunction, method: str = "direct") -> np.ndarray:
    """
    Compute the linear approximation table as a (2^n, 2^n) int64 array, with
        LAT[a][b] = sum over x of (-1)^(a.x XOR f(x) XOR b.x).

    method="direct" evaluates this definition for every (a, b); it costs O(8^n) and is the reference.
    method="walsh" uses a.x XOR b.x = (a XOR b).x, so LAT[a][b] = W[a XOR b], from one Walsh transform.
    """
    if method == "direct":
        return _lat_direct(function)
    if method == "walsh":
        return _lat_from_walsh(function)
    raise InvalidArgumentError(f"Unknown LAT method '{method}'. Expected one of {', '.join(LAT_METHODS)}.")


def _lat_direct(function: BooleanFunction) -> np.ndarray:
    # signs[a][x] = (-1)^(a.x); then LAT = signs * diag((-1)^f) * signs^T.
    signs = 1 - 2 * parity_matrix(function.variable_count).view(np.ndarray).astype(np.int64)
    weighted = signs * signed_table(function)[None, :]
    return weighted @ signs.T


def _lat_from_walsh(function: BooleanFunction) -> np.ndarray:
    spectrum = walsh_transform(function)
    masks = np.arange(function.size)
    return spectrum[masks[:, None] ^ masks[None, :]]


REG.register("table", "lat", lat_table)
