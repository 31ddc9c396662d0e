import click
from storage.json_storage_utils import (
    load_input_functions,
    save_input_functions
)
from analysis import Analysis
from errors import TruthTableFormatError
from properties import compute_all_properties
from user_input_parser import TruthTableParser
from cli_commands.cli_utils import format_analysis, build_analysis_from_dict, run_property_tasks


@click.command("add-input")
@click.option("--tt", "tt_values", multiple=True,
        help="Truth table as a 0/1 string of length 2^n, f(0) first. May be given several times.")
@click.option("--tt-file", type=click.Path(exists=True, dir_okay=False), multiple=True,
        help=("Path to a file with one truth table per line. "
              "Blank lines and lines starting with '#' are ignored."))
@click.option("--label", "labels", multiple=True,
        help="Attach a label to each new function, in order. E.g. --label 'majority' multiple times.")
@click.option("--max-threads", default=None, type=int,
        help="Limit the number of parallel processes used. Default uses all available cores; 1 runs in-process.")
def add_input_cli(tt_values, tt_file, labels, max_threads):
    """
        Adds Boolean functions to storage/input_functions.json and computes their properties.
      - Inline truth tables via --tt
      - Truth table files via --tt-file
    """
    function_list = load_input_functions()
    # Two entries are duplicates when their truth tables coincide.
    existing_keys = {entry["tt"] for entry in function_list}
    parser = TruthTableParser()

    # -------------------------------------------------------------------------------
    # Collect new functions from --tt and --tt-file, skipping duplicates.
    # -------------------------------------------------------------------------------
    new_functions = []

    for tt_str in tt_values:
        try:
            function = parser.parse_line(tt_str)
        except TruthTableFormatError as exc:
            click.echo(f"Error parsing truth table '{tt_str}': {exc}", err=True)
            continue

        candidate_key = function.to_bit_string()
        if candidate_key in existing_keys:
            click.echo(f"Skipped duplicate truth table {tt_str} (already in file).")
            continue
        new_functions.append(function)
        existing_keys.add(candidate_key)

    for tt_filepath_str in tt_file:
        try:
            parsed_lines = parser.parse_file(tt_filepath_str)
        except TruthTableFormatError as exc:
            raise click.ClickException(str(exc)) from exc

        for line_no, function in parsed_lines:
            candidate_key = function.to_bit_string()
            if candidate_key in existing_keys:
                click.echo(f"Skipped duplicate truth table line {line_no} in '{tt_filepath_str}' (already in file).")
                continue
            new_functions.append(function)
            existing_keys.add(candidate_key)

    # If no new functions, we are done.
    if not new_functions:
        click.echo("No new functions were added.")
        return

    # -------------------------------------------------------------------------------
    # Compute all properties of each new function, one process per function.
    # -------------------------------------------------------------------------------
    tasks = list(enumerate(new_functions))
    results_map = run_property_tasks(_compute_properties_task, tasks, max_threads)

    final_entries = []
    for idx_value, function in enumerate(new_functions):
        label = labels[idx_value] if idx_value < len(labels) else ""
        analysis = Analysis(function, results_map[idx_value], label)
        final_entries.append(analysis.to_dict())

    function_list.extend(final_entries)
    save_input_functions(function_list)

    click.echo("\nNewly Added Functions:")
    click.echo("-" * 100)
    first_index = len(function_list) - len(final_entries)
    for offset, entry_dictionary in enumerate(final_entries):
        print_object = build_analysis_from_dict(entry_dictionary)
        click.echo(format_analysis(print_object, f"FUNCTION {first_index + offset}"))
        click.echo("-" * 100)


def _compute_properties_task(task_data):
    # Concurrency worker: compute every default property of one function.
    idx_value, function = task_data
    analysis = Analysis(function)
    compute_all_properties(analysis)
    return (idx_value, analysis.properties)