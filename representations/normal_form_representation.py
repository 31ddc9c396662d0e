from typing import List, Sequence, Tuple
import galois
import numpy as np
from representations.abstract_representation import Representation
from boolean_function import BooleanFunction
from computations.transforms.moebius import moebius_inverse
from errors import InvalidArgumentError


class NormalFormRepresentation(Representation):
    """
    A list of clauses over variables 1..n, each clause a tuple of small integers.
    DNF and CNF clauses hold signed literals (+i asserted, -i negated); ANF monomials hold unsigned indices.
    """

    def __init__(self, clauses: Sequence[Sequence[int]], variable_count: int):
        self.variable_count = variable_count
        self.clauses: List[Tuple[int, ...]] = [tuple(int(literal) for literal in clause) for clause in clauses]
        for clause in self.clauses:
            for literal in clause:
                if literal == 0 or abs(literal) > variable_count:
                    raise InvalidArgumentError(
                        f"Literal {literal} is outside the variables 1..{variable_count}.")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.variable_count == other.variable_count and self.clauses == other.clauses

    def __len__(self):
        return len(self.clauses)

    def __repr__(self):
        return f"{type(self).__name__}(variable_count={self.variable_count}, clauses={self.clauses})"

    def _inputs_matching(self, clause: Tuple[int, ...]) -> np.ndarray:
        # Inputs x whose bits satisfy every signed literal in the clause.
        inputs = np.arange(1 << self.variable_count)
        mask = np.ones(inputs.size, dtype=bool)
        for literal in clause:
            bit_values = (inputs >> (abs(literal) - 1)) & 1
            mask &= bit_values == (1 if literal > 0 else 0)
        return mask


class DNFRepresentation(NormalFormRepresentation):
    # OR of AND-clauses, one minterm per input where f is 1.

    def to_truth_table(self):
        from representations.truth_table_representation import TruthTableRepresentation
        table = np.zeros(1 << self.variable_count, dtype=np.uint8)
        for clause in self.clauses:
            table[self._inputs_matching(clause)] = 1
        return TruthTableRepresentation(BooleanFunction(table, self.variable_count))

    def to_string(self) -> str:
        if not self.clauses:
            return "0"
        parts = []
        for clause in self.clauses:
            parts.append("(" + " & ".join(_literal_str(literal) for literal in clause) + ")")
        return " | ".join(parts)


class CNFRepresentation(NormalFormRepresentation):
    # AND of OR-clauses, one maxterm per input where f is 0.

    def to_truth_table(self):
        from representations.truth_table_representation import TruthTableRepresentation
        table = np.ones(1 << self.variable_count, dtype=np.uint8)
        for clause in self.clauses:
            # A disjunction is false exactly where every literal is false.
            negated = tuple(-literal for literal in clause)
            table[self._inputs_matching(negated)] = 0
        return TruthTableRepresentation(BooleanFunction(table, self.variable_count))

    def to_string(self) -> str:
        if not self.clauses:
            return "1"
        parts = []
        for clause in self.clauses:
            parts.append("(" + " | ".join(_literal_str(literal) for literal in clause) + ")")
        return " & ".join(parts)


class ANFRepresentation(NormalFormRepresentation):
    # XOR of AND-monomials (Zhegalkin polynomial). The empty monomial is the constant 1.

    def __init__(self, clauses: Sequence[Sequence[int]], variable_count: int):
        super().__init__(clauses, variable_count)
        for monomial in self.clauses:
            if any(variable < 0 for variable in monomial):
                raise InvalidArgumentError("ANF monomials cannot contain negated variables.")

    @property
    def degree(self) -> int:
        return max((len(monomial) for monomial in self.clauses), default=0)

    def coefficients(self) -> galois.FieldArray:
        # Möbius coefficient vector; a monomial listed twice cancels out.
        coefficients = galois.GF2.Zeros(1 << self.variable_count)
        for monomial in self.clauses:
            index = sum(1 << (variable - 1) for variable in set(monomial))
            coefficients[index] += galois.GF2(1)
        return coefficients

    def to_truth_table(self):
        from representations.truth_table_representation import TruthTableRepresentation
        table = moebius_inverse(self.coefficients(), self.variable_count)
        return TruthTableRepresentation(BooleanFunction(table.view(np.ndarray), self.variable_count))

    def to_string(self) -> str:
        # Example: [(), (1,), (1, 2)] -> "x1*x2 + x1 + 1"
        if not self.clauses:
            return "0"
        ordered = sorted(self.clauses, key=lambda monomial: (-len(monomial), monomial))
        parts = []
        for monomial in ordered:
            if not monomial:
                parts.append("1")
            else:
                parts.append("*".join(f"x{variable}" for variable in monomial))
        return " + ".join(parts)


def _literal_str(literal: int) -> str:
    return f"x{literal}" if literal > 0 else f"~x{-literal}"
