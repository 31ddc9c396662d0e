from typing import Any, Dict, Optional
from boolean_function import BooleanFunction


class Analysis:
    """
    Pairs an immutable BooleanFunction with the properties computed for it so far.
    Property aggregators registered in REG fill 'properties' by key; the function itself is never touched.
    """

    def __init__(self, function: BooleanFunction, properties: Optional[Dict[str, Any]] = None, label: str = ""):
        self.function = function
        self.properties: Dict[str, Any] = dict(properties) if properties else {}
        self.label = label

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "Analysis":
        # Rebuild an Analysis from a storage dictionary.
        function = BooleanFunction.from_bits(entry["tt"], entry["n"])
        return cls(function, entry.get("properties", {}), entry.get("label", ""))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tt": self.function.to_bit_string(),
            "n": self.function.variable_count,
            "label": self.label,
            "properties": self.properties,
        }

    def __repr__(self):
        return (f"Analysis(n={self.function.variable_count}, label={self.label!r}, "
                f"properties={sorted(self.properties)})")
