from typing import List, Tuple
import numpy as np
from boolean_function import BooleanFunction
from computations.transforms.moebius import moebius_transform

Clause = Tuple[int, ...]


def to_dnf(function: BooleanFunction) -> List[Clause]:
    """
    One conjunction per input x with f(x) = 1, in increasing x.
    Literal i (1..n) is +i when bit i-1 of x is set and -i otherwise.
    """
    return [_minterm(x, function.variable_count) for x in np.flatnonzero(function.values)]


def to_cnf(function: BooleanFunction) -> List[Clause]:
    """
    One disjunction per input x with f(x) = 0, in increasing x: the negated minterm of x.
    Literal i (1..n) is -i when bit i-1 of x is set and +i otherwise.
    """
    return [tuple(-literal for literal in _minterm(x, function.variable_count))
            for x in np.flatnonzero(function.values == 0)]


def to_anf(function: BooleanFunction) -> List[Clause]:
    """
    Monomials of the algebraic normal form, in increasing order of their Möbius index u.
    Each monomial lists the variables j+1 for the bits j set in u; u = 0 gives the constant term ().
    """
    coefficients = moebius_transform(function).view(np.ndarray)
    return [_support(u, function.variable_count) for u in np.flatnonzero(coefficients)]


def _minterm(x: int, variable_count: int) -> Clause:
    return tuple(
        variable if (x >> (variable - 1)) & 1 else -variable
        for variable in range(1, variable_count + 1)
    )


def _support(u: int, variable_count: int) -> Clause:
    return tuple(bit + 1 for bit in range(variable_count) if (u >> bit) & 1)
