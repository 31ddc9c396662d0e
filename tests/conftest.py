import random
import pytest
from boolean_function import BooleanFunction


def random_function(variable_count: int, seed: int) -> BooleanFunction:
    rng = random.Random(seed)
    return BooleanFunction.from_bits([rng.randint(0, 1) for _ in range(1 << variable_count)], variable_count)


def dot(a: int, x: int) -> int:
    return bin(a & x).count("1") & 1


@pytest.fixture
def x1_function():
    # Bit set 0b1010: f(1) = f(3) = 1, i.e. f(x1, x2) = x1.
    return BooleanFunction.from_int(0b1010, 2)


@pytest.fixture
def majority3():
    # maj(x1, x2, x3), true when at least two inputs are set.
    bits = [1 if bin(x).count("1") >= 2 else 0 for x in range(8)]
    return BooleanFunction.from_bits(bits, 3)


@pytest.fixture
def bent4():
    # x1*x2 + x3*x4, a bent function of 4 variables.
    bits = [((x & 1) & ((x >> 1) & 1)) ^ (((x >> 2) & 1) & ((x >> 3) & 1)) for x in range(16)]
    return BooleanFunction.from_bits(bits, 4)


@pytest.fixture(params=[(1, 11), (2, 12), (3, 13), (4, 14), (5, 15)])
def random_fn(request):
    variable_count, seed = request.param
    return random_function(variable_count, seed)
