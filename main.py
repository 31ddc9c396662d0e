import click
import multiprocessing as mp

try:
    mp.set_start_method("spawn", force=True)
except RuntimeError:
    pass

# Import commands from modules
from cli_commands.add_input_cmd import add_input_cli
from cli_commands.compute_properties_cmd import compute_properties_cli
from cli_commands.convert_cmd import convert_cli
from cli_commands.correlate_cmd import correlate_cli
from cli_commands.print_cmd import print_cli
from cli_commands.reset_storage_cmd import reset_storage_cli
from cli_commands.save_to_file_cmd import save_to_file_cli
from cli_commands.table_cmd import table_cli


@click.group()
def cli():
    # CLI interface for analysing single-output Boolean functions.
    pass

# Register commands
cli.add_command(add_input_cli)
cli.add_command(compute_properties_cli)
cli.add_command(convert_cli)
cli.add_command(correlate_cli)
cli.add_command(print_cli)
cli.add_command(reset_storage_cli)
cli.add_command(save_to_file_cli)
cli.add_command(table_cli)

if __name__ == "__main__":
    cli()
