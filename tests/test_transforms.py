import numpy as np
import pytest
from boolean_function import BooleanFunction
from computations.invariants.hamming_weight import hamming_weight, is_balanced
from computations.transforms.moebius import moebius_inverse, moebius_transform
from computations.transforms.walsh import (
    inverse_walsh_spectrum,
    inverse_walsh_transform,
    signed_table,
    walsh_transform,
)
from errors import InvalidArgumentError
from conftest import dot


def brute_force_moebius(function):
    size = function.size
    return [
        sum(function.bit(x) for x in range(size) if x & u == x) % 2
        for u in range(size)
    ]


def brute_force_walsh(function):
    size = function.size
    return [
        sum((-1) ** (function.bit(x) ^ dot(a, x)) for x in range(size))
        for a in range(size)
    ]


def test_hamming_weight_matches_brute_force(random_fn):
    assert hamming_weight(random_fn) == sum(random_fn.bit(x) for x in range(random_fn.size))


def test_hamming_weight_example():
    assert hamming_weight(BooleanFunction.from_int(0b1011, 2)) == 3


def test_is_balanced(x1_function, majority3):
    assert is_balanced(x1_function)
    assert is_balanced(majority3)
    assert not is_balanced(BooleanFunction.from_bits("0001", 2))


def test_moebius_example(x1_function):
    # f = x1 has the single monomial x1, at index u = 0b01.
    assert moebius_transform(x1_function).tolist() == [0, 1, 0, 0]


def test_moebius_majority(majority3):
    # maj = x1x2 + x1x3 + x2x3
    coefficients = moebius_transform(majority3).tolist()
    assert [u for u, c in enumerate(coefficients) if c] == [0b011, 0b101, 0b110]


def test_moebius_matches_subset_sum(random_fn):
    assert moebius_transform(random_fn).tolist() == brute_force_moebius(random_fn)


def test_moebius_is_self_inverse(random_fn):
    coefficients = moebius_transform(random_fn)
    twice = moebius_transform(BooleanFunction.from_bits(coefficients.view(np.ndarray), random_fn.variable_count))
    assert twice.tolist() == random_fn.values.tolist()
    assert moebius_inverse(coefficients, random_fn.variable_count).tolist() == random_fn.values.tolist()


def test_moebius_does_not_touch_input(majority3):
    before = majority3.to_bit_string()
    moebius_transform(majority3)
    assert majority3.to_bit_string() == before


def test_moebius_inverse_rejects_wrong_length():
    with pytest.raises(InvalidArgumentError):
        moebius_inverse([0, 1, 0], 2)


def test_walsh_example(x1_function):
    spectrum = walsh_transform(x1_function)
    assert spectrum.shape == (4,)
    assert spectrum.tolist() == [0, 4, 0, 0]


def test_walsh_matches_definition(random_fn):
    assert walsh_transform(random_fn).tolist() == brute_force_walsh(random_fn)


def test_walsh_zero_entry(random_fn):
    assert walsh_transform(random_fn)[0] == random_fn.size - 2 * hamming_weight(random_fn)


def test_walsh_length_is_two_to_the_n():
    # Eight variables: the spectrum has 256 entries, not 8.
    function = BooleanFunction.from_bits([x & 1 for x in range(256)], 8)
    spectrum = walsh_transform(function)
    assert spectrum.size == 256
    assert spectrum[1] == 256
    assert np.count_nonzero(spectrum) == 1


def test_bent_function_has_flat_spectrum(bent4):
    assert set(np.abs(walsh_transform(bent4)).tolist()) == {4}


def test_inverse_walsh_of_spectrum_round_trip(random_fn):
    spectrum = walsh_transform(random_fn)
    restored = inverse_walsh_spectrum(spectrum, random_fn.variable_count)
    assert restored.tolist() == signed_table(random_fn).tolist()


def test_inverse_walsh_transform_scales_by_two_to_the_n(random_fn):
    values = inverse_walsh_transform(random_fn)
    expected = walsh_transform(random_fn) / random_fn.size
    assert np.allclose(values, expected)


def test_inverse_walsh_spectrum_rejects_wrong_size(x1_function):
    spectrum = walsh_transform(x1_function)
    with pytest.raises(InvalidArgumentError):
        inverse_walsh_spectrum(spectrum, 3)
    with pytest.raises(InvalidArgumentError):
        inverse_walsh_spectrum(spectrum[:2], 2)


def test_inverse_walsh_spectrum_rejects_non_spectrum():
    with pytest.raises(InvalidArgumentError):
        inverse_walsh_spectrum([1, 0, 0, 0], 2)
