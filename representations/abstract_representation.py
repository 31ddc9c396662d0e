from abc import ABC, abstractmethod

class Representation(ABC):
    # Abstract base class for the representations of a single-output Boolean function.

    @abstractmethod
    def to_truth_table(self):
        # Convert the current representation into a truth table representation.
        # Returns a new TruthTableRepresentation holding an equivalent BooleanFunction.
        pass

    @abstractmethod
    def to_string(self) -> str:
        # Human-readable rendering used by the CLI.
        pass

    def __str__(self):
        return self.to_string()
