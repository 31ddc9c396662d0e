from representations.abstract_representation import Representation
from representations.normal_form_representation import (
    ANFRepresentation,
    CNFRepresentation,
    DNFRepresentation,
)
from computations.normal_forms import to_anf, to_cnf, to_dnf
from boolean_function import BooleanFunction


class TruthTableRepresentation(Representation):
    # Represents the Boolean function by its truth table, f(0) first.

    def __init__(self, function: BooleanFunction):
        self.function = function

    def to_dnf(self) -> DNFRepresentation:
        return DNFRepresentation(to_dnf(self.function), self.function.variable_count)

    def to_cnf(self) -> CNFRepresentation:
        return CNFRepresentation(to_cnf(self.function), self.function.variable_count)

    def to_anf(self) -> ANFRepresentation:
        # The ANF comes from the Möbius transform of the table.
        return ANFRepresentation(to_anf(self.function), self.function.variable_count)

    def to_truth_table(self):
        return self

    def to_string(self) -> str:
        return self.function.to_bit_string()

    def __repr__(self):
        return f"TruthTableRepresentation(size={self.function.size})"
