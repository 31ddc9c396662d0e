import numpy as np
from boolean_function import BooleanFunction
from registry import REG


def hamming_weight(function: BooleanFunction) -> int:
    # Number of inputs x with f(x) = 1.
    return int(np.count_nonzero(function.values))


def is_balanced(function: BooleanFunction) -> bool:
    return 2 * hamming_weight(function) == function.size


@REG.register("property", "hamming_weight")
def hamming_weight_aggregator(analysis) -> None:
    analysis.properties["hamming_weight"] = hamming_weight(analysis.function)


@REG.register("property", "is_balanced")
def is_balanced_aggregator(analysis) -> None:
    analysis.properties["is_balanced"] = is_balanced(analysis.function)
