from typing import List
from analysis import Analysis
from registry import REG

# Properties computed by compute_all_properties, in display order.
# DDT and LAT are tables of size O(4^n); they are computed on request only (see REG "table").
PROPERTY_ORDER = [
    "hamming_weight",
    "is_balanced",
    "algebraic_degree",
    "is_affine",
    "nonlinearity",
    "anf",
    "walsh_spectrum",
    "autocorrelation",
]


def compute_all_properties(analysis: Analysis) -> None:
    for key in PROPERTY_ORDER:
        compute_missing(analysis, key)

    reorder_properties(analysis)


def reorder_properties(analysis: Analysis) -> None:
    # Reorders the analysis.properties dictionary into the preferred display order.
    old_map = analysis.properties
    new_map = {}

    for key in PROPERTY_ORDER:
        if key in old_map:
            new_map[key] = old_map[key]

    # Append leftover keys at the end (if any).
    for leftover_key in old_map:
        if leftover_key not in new_map:
            new_map[leftover_key] = old_map[leftover_key]

    analysis.properties = new_map


def compute_selected(analysis: Analysis, property_names: List[str]) -> None:
    for property_name in property_names:
        compute_missing(analysis, property_name)

    reorder_properties(analysis)


def compute_missing(analysis: Analysis, property_name: str) -> None:
    if property_name in analysis.properties:
        return

    aggregator_function = REG.get("property", property_name)
    aggregator_function(analysis)
