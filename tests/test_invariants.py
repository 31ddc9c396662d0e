import pytest
from boolean_function import BooleanFunction
from computations.invariants.anf_invariants import algebraic_degree, is_affine
from computations.invariants.correlation import correlation
from computations.invariants.nonlinearity import nonlinearity
from computations.normal_forms import to_anf
from computations.transforms.walsh import walsh_transform
from errors import DimensionMismatchError, InvalidArgumentError
from conftest import random_function


def brute_force_nonlinearity(function):
    # Distance to every affine function a.x + c.
    size = function.size
    best = size
    for a in range(size):
        for c in (0, 1):
            distance = sum(function.bit(x) != ((bin(a & x).count("1") & 1) ^ c) for x in range(size))
            best = min(best, distance)
    return best


def test_nonlinearity_example(x1_function):
    assert nonlinearity(walsh_transform(x1_function)) == 0


def test_nonlinearity_matches_affine_distance(random_fn):
    assert nonlinearity(walsh_transform(random_fn)) == brute_force_nonlinearity(random_fn)


def test_bent_nonlinearity(bent4):
    assert nonlinearity(walsh_transform(bent4)) == 6


def test_nonlinearity_accepts_plain_lists():
    assert nonlinearity([0, 4, 0, 0]) == 0
    assert nonlinearity([2, 2, 2, -2]) == 1


@pytest.mark.parametrize("spectrum", [[], [4], [0, 4, 0], [[0, 2], [2, 0]]])
def test_nonlinearity_rejects_bad_length(spectrum):
    with pytest.raises(InvalidArgumentError):
        nonlinearity(spectrum)


def test_algebraic_degree_of_constants():
    zero = BooleanFunction.from_bits("0000", 2)
    one = BooleanFunction.from_bits("1111", 2)
    assert to_anf(zero) == []
    assert to_anf(one) == [()]
    assert algebraic_degree(to_anf(zero)) == 0
    assert algebraic_degree(to_anf(one)) == 0
    assert is_affine(to_anf(zero))
    assert is_affine(to_anf(one))


def test_degree_and_affinity(x1_function, majority3, bent4):
    assert algebraic_degree(to_anf(x1_function)) == 1
    assert is_affine(to_anf(x1_function))
    assert algebraic_degree(to_anf(majority3)) == 2
    assert not is_affine(to_anf(majority3))
    assert algebraic_degree(to_anf(bent4)) == 2


def test_degree_on_raw_monomials():
    assert algebraic_degree([(1,), (1, 2)]) == 2
    assert not is_affine([(1,), (1, 2)])
    assert is_affine([(), (1,), (3,)])


def test_full_degree_function():
    # A single 1 at the top input is the monomial x1*x2*x3.
    function = BooleanFunction.from_bits("00000001", 3)
    assert to_anf(function) == [(1, 2, 3)]
    assert algebraic_degree(to_anf(function)) == 3


def test_correlation_example():
    f = BooleanFunction.from_int(0b1110, 2)
    g = BooleanFunction.from_int(0b1100, 2)
    assert correlation(f, g) == 0.5


def test_correlation_with_itself_and_complement(random_fn):
    complement = BooleanFunction.from_bits(1 - random_fn.values, random_fn.variable_count)
    assert correlation(random_fn, random_fn) == 1
    assert correlation(random_fn, complement) == -1


def test_correlation_is_symmetric():
    f = random_function(4, 1)
    g = random_function(4, 2)
    assert correlation(f, g) == correlation(g, f)
    assert -1 <= correlation(f, g) <= 1


def test_correlation_relates_to_walsh(random_fn):
    # Correlation with the linear function a.x is W[a] / 2^n.
    spectrum = walsh_transform(random_fn)
    size = random_fn.size
    for a in range(size):
        linear = BooleanFunction.from_bits([bin(a & x).count("1") & 1 for x in range(size)], random_fn.variable_count)
        assert correlation(random_fn, linear) == spectrum[a] / size


def test_correlation_dimension_mismatch(x1_function, majority3):
    with pytest.raises(DimensionMismatchError):
        correlation(x1_function, majority3)
