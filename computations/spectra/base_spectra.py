from __future__ import annotations
from abc import ABC, abstractmethod
import numpy as np
from boolean_function import BooleanFunction

class SpectraComputation(ABC):
    """
    Abstract base class for spectra of a single-output Boolean function,
    e.g. the Walsh spectrum or the autocorrelation spectrum.
    """

    # Key under which the aggregator stores the spectrum in Analysis.properties.
    key: str = ""

    @abstractmethod
    def compute_spectrum(self, function: BooleanFunction) -> np.ndarray:
        """
        Implement the logic for computing the specific spectrum of the given function.
        Should return a freshly allocated int64 array of length 2^n, indexed by mask or shift.
        """
        pass

    def store(self, analysis) -> None:
        # Compute and store the spectrum as a plain list so that it stays JSON-serialisable.
        spectrum = self.compute_spectrum(analysis.function)
        analysis.properties[self.key] = [int(value) for value in spectrum]
