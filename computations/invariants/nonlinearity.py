from typing import Sequence
import numpy as np
from errors import InvalidArgumentError
from registry import REG


def nonlinearity(walsh_spectrum: Sequence[int]) -> int:
    """
    Minimum Hamming distance from f to the affine functions, 2^(n-1) - max|W[a]| / 2.
    The spectrum must have length 2^n for some n >= 1; n is taken from that length.
    """
    spectrum = np.asarray(walsh_spectrum, dtype=np.int64)
    length = spectrum.size
    if spectrum.ndim != 1 or length < 2 or length & (length - 1):
        raise InvalidArgumentError(
            f"A Walsh spectrum has length 2^n with n >= 1, got shape {spectrum.shape}.")

    max_abs = int(np.abs(spectrum).max())
    return length // 2 - max_abs // 2


@REG.register("property", "nonlinearity")
def nonlinearity_aggregator(analysis) -> None:
    # Reuses a stored Walsh spectrum when available.
    if "walsh_spectrum" not in analysis.properties:
        REG.get("property", "walsh_spectrum")(analysis)
    analysis.properties["nonlinearity"] = nonlinearity(analysis.properties["walsh_spectrum"])
