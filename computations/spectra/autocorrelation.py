from __future__ import annotations
import numpy as np
from boolean_function import BooleanFunction
from computations.spectra.base_spectra import SpectraComputation
from registry import REG


def autocorrelation_spectrum(function: BooleanFunction) -> np.ndarray:
    """
    Return the autocorrelation spectrum as an int64 array of length 2^n:
        AC[a] = sum over x of (-1)^(f(x) XOR f(x XOR a)).
    AC[0] is always 2^n.
    """
    size = function.size
    values = function.values
    inputs = np.arange(size)
    spectrum = np.empty(size, dtype=np.int64)

    for shift in range(size):
        disagreements = np.count_nonzero(values != values[inputs ^ shift])
        spectrum[shift] = size - 2 * disagreements
    return spectrum


class AutocorrelationSpectrum(SpectraComputation):
    key = "autocorrelation"

    def compute_spectrum(self, function: BooleanFunction) -> np.ndarray:
        return autocorrelation_spectrum(function)


@REG.register("property", "autocorrelation")
def autocorrelation_aggregator(analysis) -> None:
    # Aggregator function for 'autocorrelation'. Store into analysis.properties["autocorrelation"].
    AutocorrelationSpectrum().store(analysis)
