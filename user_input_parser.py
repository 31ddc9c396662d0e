# user_input_parser.py
# Description: Parses truth-table lines into BooleanFunction objects.

import re
from pathlib import Path
from typing import List, Tuple
from boolean_function import BooleanFunction
from errors import TruthTableFormatError

LINE_PATTERN = re.compile(r"^[01]+$")


class TruthTableParser:
    """
    A truth-table line is a string over {0,1} whose length is 2^n for some n >= 1.
    Character i is f(i), so "0101" is the function f(x1, x2) = x1.
    """

    def parse_line(self, line: str) -> BooleanFunction:
        if line is None:
            raise TruthTableFormatError("No truth-table line was given.")
        stripped = line.strip()
        if not LINE_PATTERN.match(stripped):
            raise TruthTableFormatError(f"Truth table must contain only '0' and '1', got '{_preview(stripped)}'.")

        variable_count = variable_count_for_length(len(stripped))
        return BooleanFunction.from_bits(stripped, variable_count)

    def parse_file(self, file_path) -> List[Tuple[int, BooleanFunction]]:
        # Returns (line_number, function) pairs; blank lines and '#' comments are skipped.
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        parsed = []
        for line_no, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                parsed.append((line_no, self.parse_line(stripped)))
            except TruthTableFormatError as exc:
                raise TruthTableFormatError(f"{path.name}, line {line_no}: {exc}") from exc
        return parsed


def variable_count_for_length(length: int) -> int:
    # Returns n with length == 2^n, n >= 1.
    if length < 2 or length & (length - 1):
        raise TruthTableFormatError(
            f"Truth-table length must be a power of two of at least 2, got {length}.")
    return length.bit_length() - 1


def _preview(text: str, limit: int = 40) -> str:
    return text if len(text) <= limit else text[:limit - 3] + "..."
