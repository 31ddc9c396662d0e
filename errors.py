class InvalidArgumentError(ValueError):
    # Raised when a Boolean function (or an input array) cannot be built from the given data.
    pass


class DomainError(IndexError):
    # Raised when an input index falls outside [0, 2^n).
    pass


class DimensionMismatchError(ValueError):
    # Raised when two functions with different variable counts are combined.
    pass


class TruthTableFormatError(ValueError):
    # Raised by the line parser for malformed truth-table input.
    pass
