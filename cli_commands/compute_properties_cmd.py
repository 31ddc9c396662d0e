import click
from typing import Tuple, Dict, Any
from storage.json_storage_utils import (
    load_input_functions,
    save_input_functions
)
from cli_commands.cli_utils import (
    format_analysis,
    build_analysis_from_dict,
    get_property_choices,
    run_property_tasks
)
from properties import compute_all_properties, compute_selected


@click.command("compute-properties")
@click.option("--index", "input_index", default=None, type=int,
              help="Index of a single stored function to process.")
@click.option("--property", "property_names", multiple=True, default=("all",),
              type=click.Choice(get_property_choices(), case_sensitive=False),
              help="Property to compute (repeatable). Default: all.")
@click.option("--max-threads", "max_threads", default=None, type=int,
              help="Limit the number of parallel processes used. Default uses all available cores; 1 runs in-process.")
def compute_properties_cli(input_index, property_names, max_threads):
    # Computes missing properties for the stored functions.
    function_list = load_input_functions()
    if not function_list:
        click.echo("No functions in input list. Please run 'add-input' first.")
        return

    if input_index is not None:
        if input_index < 0 or input_index >= len(function_list):
            click.echo(f"Invalid input function index: {input_index}.")
            return
        selected = [input_index]
    else:
        selected = list(range(len(function_list)))

    names = [name.lower() for name in property_names]
    tasks = [(function_index, (function_list[function_index], names)) for function_index in selected]
    result_map = run_property_tasks(_compute_properties_for_one_function, tasks, max_threads)

    # Merge results into the main function list.
    for function_index, updated_dict in result_map.items():
        function_list[function_index] = updated_dict

    save_input_functions(function_list)

    for function_index in selected:
        show_analysis = build_analysis_from_dict(function_list[function_index])
        click.echo(format_analysis(show_analysis, f"FUNCTION {function_index}"))
        click.echo("-" * 100)

    if input_index is not None:
        click.echo(f"Finished computing properties for FUNCTION {input_index}.")
    else:
        click.echo("Finished computing properties for all stored functions.")


def _compute_properties_for_one_function(task: Tuple[int, Tuple[Dict[str, Any], list]]) -> Tuple[int, Dict[str, Any]]:
    function_index, (function_dict, names) = task
    analysis = build_analysis_from_dict(function_dict)

    if "all" in names:
        compute_all_properties(analysis)
    else:
        compute_selected(analysis, names)

    return (function_index, analysis.to_dict())
