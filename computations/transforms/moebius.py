import galois
from boolean_function import BooleanFunction
from errors import InvalidArgumentError

"""
Möbius transform over GF(2), following the in-place butterfly of
  A. Joux, "Algorithmic Cryptanalysis", Algorithm 9.6.
"""


def moebius_transform(function: BooleanFunction) -> galois.FieldArray:
    """
    Return the ANF coefficients c of f, with c(u) = XOR of f(x) over every x whose bits are a subset of u.
    c[0] is the constant term and c[u] the coefficient of the monomial over the variables set in u.
    """
    coefficients = function.truth_table
    return _xor_butterfly(coefficients, function.variable_count)


def moebius_inverse(coefficients, variable_count: int) -> galois.FieldArray:
    # The transform is an involution, so the same butterfly maps ANF coefficients back to a truth table.
    work = galois.GF2(coefficients, copy=True)
    size_total = 1 << variable_count
    if work.ndim != 1 or work.size != size_total:
        raise InvalidArgumentError(
            f"Expected {size_total} coefficients for {variable_count} variables, got shape {work.shape}.")
    return _xor_butterfly(work, variable_count)


def _xor_butterfly(work: galois.FieldArray, variable_count: int) -> galois.FieldArray:
    # Stage i pairs the two halves of every block of width 2^(i+1): upper half ^= lower half.
    # Reshaping to (blocks, 2, size) lays out [position, half, offset] as position*2*size + half*size + offset.
    for stage in range(variable_count):
        size = 1 << stage
        blocks = work.reshape(-1, 2, size)
        blocks[:, 1, :] = blocks[:, 1, :] + blocks[:, 0, :]
    return work
