import pandas as pd
from typing import Any, Dict, List
import numpy as np
from storage.json_storage_utils import SCALAR_PROPERTIES


def properties_dataframe(function_list: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    One row per stored function with its truth table, variable count, label and scalar properties.
    Properties that were never computed are left empty.
    """
    columns = ["tt", "n", "label"] + SCALAR_PROPERTIES
    rows = []
    for function_dictionary in function_list:
        properties = function_dictionary.get("properties", {})
        row = {
            "tt": function_dictionary["tt"],
            "n": int(function_dictionary["n"]),
            "label": function_dictionary.get("label", ""),
        }
        for key in SCALAR_PROPERTIES:
            row[key] = properties.get(key, None)
        rows.append(row)

    return pd.DataFrame(rows, columns=columns)


def table_dataframe(table: np.ndarray, row_name: str, column_names: List[str]) -> pd.DataFrame:
    # Labels a DDT / LAT / spectrum array for display or CSV export.
    dataframe = pd.DataFrame(table, columns=column_names)
    dataframe.index.name = row_name
    return dataframe


def save_dataframe_csv(dataframe: pd.DataFrame, filename: str) -> None:
    dataframe.to_csv(filename, index=dataframe.index.name is not None)
