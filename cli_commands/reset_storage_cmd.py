import click
from storage.json_storage_utils import INPUT_FUNCTIONS_FILE, delete_input_functions

@click.command("reset-storage")
@click.option("--yes", "-y", is_flag=True)
def reset_storage_cli(yes):
    """
    Removes the stored functions file:
      - storage/input_functions.json
    """
    if not yes:
        click.confirm(
            "Are you sure you want to erase all stored functions? "
            "This action cannot be undone.",
            abort=True
        )

    try:
        deleted = delete_input_functions()
    except OSError as exc:
        raise click.ClickException(f"Error deleting {INPUT_FUNCTIONS_FILE}: {exc}") from exc

    if deleted:
        click.echo(f"Deleted files: {INPUT_FUNCTIONS_FILE}")
    else:
        click.echo("No storage files found to delete.")
