import json
from pathlib import Path
from typing import List, Dict, Any

STORAGE_DIR = "storage"
INPUT_FUNCTIONS_FILE = Path(STORAGE_DIR) / "input_functions.json"

# Properties kept in the file. Spectra and the ANF are stored as plain lists.
SCALAR_PROPERTIES = ["hamming_weight", "is_balanced", "algebraic_degree", "is_affine", "nonlinearity"]


def ensure_storage_folder():
    storage_path = INPUT_FUNCTIONS_FILE.parent
    if not storage_path.is_dir():
        storage_path.mkdir(parents=True, exist_ok=True)

# --------------------------------------------------------------
# input_functions.json
# --------------------------------------------------------------
def load_input_functions() -> List[Dict[str, Any]]:
    # Reads the stored functions as a list of dictionaries {"tt", "n", "label", "properties"}.
    ensure_storage_folder()
    if not INPUT_FUNCTIONS_FILE.is_file():
        return []
    with INPUT_FUNCTIONS_FILE.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if "input_functions" not in data:
        return []

    for function_dictionary in data["input_functions"]:
        _check_entry(function_dictionary)

    return data["input_functions"]


def save_input_functions(function_list: List[Dict[str, Any]]) -> None:
    # Writes the whole list of stored functions to input_functions.json.
    ensure_storage_folder()

    for function_dictionary in function_list:
        _check_entry(function_dictionary)

    data = {"input_functions": function_list}

    with INPUT_FUNCTIONS_FILE.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def delete_input_functions() -> bool:
    # Returns True if a storage file was removed.
    if INPUT_FUNCTIONS_FILE.is_file():
        INPUT_FUNCTIONS_FILE.unlink()
        return True
    return False

# --------------------------------------------------------------
# Helper to validate the shape of one stored entry.
# --------------------------------------------------------------
def _check_entry(function_dictionary: Dict[str, Any]) -> None:
    for required_key in ("tt", "n"):
        if required_key not in function_dictionary:
            raise ValueError(f"Stored function entry is missing '{required_key}': {function_dictionary!r}")
    if len(function_dictionary["tt"]) != (1 << int(function_dictionary["n"])):
        raise ValueError(
            f"Stored truth table of length {len(function_dictionary['tt'])} does not match n={function_dictionary['n']}.")
    function_dictionary.setdefault("label", "")
    function_dictionary.setdefault("properties", {})
