import click
from cli_commands.cli_utils import build_analysis_from_dict
from storage.json_storage_utils import load_input_functions
from storage_pandas import properties_dataframe, save_dataframe_csv

@click.command("save")
@click.option("--file-name", default=None, type=str,
              help="Override the default filename for the chosen export.")
@click.option("--csv", "as_csv", is_flag=True,
              help="Export the stored functions and their scalar properties as CSV.")
@click.option("--tt", is_flag=True,
              help="Export the stored truth tables in a text file (one per line).")
def save_to_file_cli(file_name, as_csv, tt):
    """
    Various exports of data from storage/input_functions.json to file(s).

    Usage examples:
        python main.py save --csv --file-name properties.csv
        => exports one CSV row per stored function.
    """
    function_list = load_input_functions()
    if not function_list:
        click.echo("No input functions found. Please run 'add-input' first.")
        return

    if not (as_csv or tt):
        click.echo("Error: Must specify at least one of --csv or --tt.")
        return

    # If both are selected, --file-name is ignored and default names are used.
    multiple_selections = as_csv and tt

    if as_csv:
        csv_filename = file_name if (file_name and not multiple_selections) else "properties_output.csv"
        save_dataframe_csv(properties_dataframe(function_list), csv_filename)
        click.echo(f"Properties saved to {csv_filename}")

    if tt:
        tt_filename = file_name if (file_name and not multiple_selections) else "tt_output.txt"
        _export_tt(function_list, tt_filename)
        click.echo(f"Truth tables saved to {tt_filename}")


def _export_tt(function_list, output_file: str):
    # One truth table per line, in the same format --tt-file accepts.
    with open(output_file, "w", encoding="utf-8") as f:
        for function_dictionary in function_list:
            analysis = build_analysis_from_dict(function_dictionary)
            f.write(analysis.function.to_bit_string() + "\n")
