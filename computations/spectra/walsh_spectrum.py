from __future__ import annotations
import numpy as np
from boolean_function import BooleanFunction
from computations.spectra.base_spectra import SpectraComputation
from computations.transforms.walsh import walsh_transform
from registry import REG


class WalshSpectrum(SpectraComputation):
    """
    Walsh-Hadamard spectrum W[a] = sum over x of (-1)^(f(x) XOR a.x).
    """
    key = "walsh_spectrum"

    def compute_spectrum(self, function: BooleanFunction) -> np.ndarray:
        return walsh_transform(function)


@REG.register("property", "walsh_spectrum")
def walsh_spectrum_aggregator(analysis) -> None:
    # Aggregator function for 'walsh_spectrum'. Store into analysis.properties["walsh_spectrum"].
    WalshSpectrum().store(analysis)
