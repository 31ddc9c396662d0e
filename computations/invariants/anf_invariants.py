from typing import Sequence
from computations.normal_forms import to_anf
from registry import REG


def algebraic_degree(anf: Sequence[Sequence[int]]) -> int:
    # Size of the largest monomial. Both the zero function ([]) and constants ([()]) have degree 0.
    return max((len(monomial) for monomial in anf), default=0)


def is_affine(anf: Sequence[Sequence[int]]) -> bool:
    return algebraic_degree(anf) <= 1


@REG.register("property", "anf")
def anf_aggregator(analysis) -> None:
    # Monomials are stored as lists so the property survives a JSON round trip.
    analysis.properties["anf"] = [list(monomial) for monomial in to_anf(analysis.function)]


@REG.register("property", "algebraic_degree")
def algebraic_degree_aggregator(analysis) -> int:
    if "algebraic_degree" in analysis.properties:
        return analysis.properties["algebraic_degree"]
    if "anf" not in analysis.properties:
        anf_aggregator(analysis)
    analysis.properties["algebraic_degree"] = algebraic_degree(analysis.properties["anf"])
    return analysis.properties["algebraic_degree"]


@REG.register("property", "is_affine")
def is_affine_aggregator(analysis) -> bool:
    if "is_affine" in analysis.properties:
        return analysis.properties["is_affine"]
    analysis.properties["is_affine"] = algebraic_degree_aggregator(analysis) <= 1
    return analysis.properties["is_affine"]
