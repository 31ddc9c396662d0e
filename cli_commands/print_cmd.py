import click
from storage.json_storage_utils import load_input_functions
from cli_commands.cli_utils import format_analysis, build_analysis_from_dict

@click.command("print")
@click.option("--index", "input_index", default=None, type=int,
              help="If specified, only prints that single index.")
@click.option("--summary", "summary", is_flag=True,
              help="If specified, prints one line per stored function.")
def print_cli(input_index, summary):
    # Print the functions stored in storage/input_functions.json.
    function_dicts = load_input_functions()
    if not function_dicts:
        click.echo("No input functions found. Please run 'add-input' first.")
        return

    if summary:
        click.echo("Summary of stored functions:\n")
        for idx, function_dictionary in enumerate(function_dicts):
            properties = function_dictionary.get("properties", {})
            label = function_dictionary.get("label", "")
            label_str = f" [{label}]" if label else ""
            click.echo(f"  FUNCTION #{idx}{label_str}: n={function_dictionary['n']}, "
                       f"weight={properties.get('hamming_weight', '?')}, "
                       f"degree={properties.get('algebraic_degree', '?')}, "
                       f"nonlinearity={properties.get('nonlinearity', '?')}")
        return

    # If no index provided, then print all functions.
    if input_index is None:
        for idx, function_dictionary in enumerate(function_dicts):
            _print_single_function(function_dictionary, idx)
    else:
        if input_index < 0 or input_index >= len(function_dicts):
            click.echo(f"Invalid input function index: {input_index}.")
            return
        _print_single_function(function_dicts[input_index], input_index)

def _print_single_function(function_dict, idx):
    analysis = build_analysis_from_dict(function_dict)
    click.echo(format_analysis(analysis, f"\nFUNCTION {idx}"))
    click.echo("-" * 100)
