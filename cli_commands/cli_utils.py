from __future__ import annotations
import click
import concurrent.futures
from typing import Any, Callable, Dict, List, Tuple
from analysis import Analysis
from boolean_function import BooleanFunction
from errors import TruthTableFormatError
from properties import PROPERTY_ORDER, reorder_properties
from registry import REG
from representations.normal_form_representation import ANFRepresentation
from user_input_parser import TruthTableParser

# Lists longer than this are shortened when printed.
MAX_PRINTED_LIST = 32


def parse_tt_option(tt_str: str) -> BooleanFunction:
    # Parse a --tt value, turning format errors into a click error.
    try:
        return TruthTableParser().parse_line(tt_str)
    except TruthTableFormatError as exc:
        raise click.ClickException(str(exc)) from exc


def anf_to_str(anf: List[List[int]], variable_count: int) -> str:
    # Convert stored ANF monomials into a polynomial string, e.g. [[], [1], [1, 2]] -> "x1*x2 + x1 + 1".
    return ANFRepresentation(anf, variable_count).to_string()


def _value_str(key: str, value: Any, variable_count: int) -> str:
    if key == "anf" and isinstance(value, list):
        return anf_to_str(value, variable_count)
    if isinstance(value, list) and len(value) > MAX_PRINTED_LIST:
        shown = ", ".join(str(item) for item in value[:MAX_PRINTED_LIST])
        return f"[{shown}, ... ({len(value)} entries)]"
    return repr(value)


def format_analysis(analysis: Analysis, label: str) -> str:
    reorder_properties(analysis)
    function = analysis.function

    table_str = function.to_bit_string()
    if len(table_str) > 64:
        table_str = table_str[:61] + "..."

    lines = []
    lines.append(f"{label}:")
    lines.append(f"  Truth table: {table_str} (n={function.variable_count})")
    if analysis.label:
        lines.append(f"  Label: {analysis.label}")
    if not analysis.properties:
        lines.append("  Properties: {}")
    else:
        lines.append("  Properties:")
        for key, value in analysis.properties.items():
            lines.append(f"    {key}: {_value_str(key, value, function.variable_count)}")

    return "\n".join(lines)


def build_analysis_from_dict(function_dictionary: Dict[str, Any]) -> Analysis:
    # Build (or reconstruct) an Analysis from a storage dictionary.
    return Analysis.from_dict(function_dictionary)


def get_property_choices() -> list[str]:
    # Registered property keys: the default order first, then any others, then "all".
    all_keys = REG.keys("property")
    final_list = [key for key in PROPERTY_ORDER if key in all_keys]
    final_list.extend(sorted(set(all_keys) - set(final_list)))
    final_list.append("all")
    return final_list


def run_property_tasks(worker: Callable[[Tuple[int, Any]], Tuple[int, Any]],
                       tasks: List[Tuple[int, Any]], max_threads: int | None) -> Dict[int, Any]:
    # Runs worker over (index, payload) tasks; returns {index: result}. max_threads=1 stays in-process.
    result_map = {}
    if max_threads == 1:
        for task in tasks:
            task_index, result = worker(task)
            result_map[task_index] = result
        return result_map

    with concurrent.futures.ProcessPoolExecutor(max_workers=max_threads) as executor:
        future_list = [executor.submit(worker, task_item) for task_item in tasks]

        # Show status for each completed job.
        total_count = len(future_list)
        completed_count = 0

        for future in concurrent.futures.as_completed(future_list):
            completed_count += 1
            click.echo(f"Completed job {completed_count} of {total_count}.")
            task_index, result = future.result()
            result_map[task_index] = result
    return result_map
