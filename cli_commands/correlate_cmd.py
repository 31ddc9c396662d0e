import click
from cli_commands.cli_utils import parse_tt_option
from computations.invariants.correlation import correlation
from errors import DimensionMismatchError


@click.command("correlate")
@click.option("--tt", "tt_values", multiple=True, required=True,
              help="Truth table as a 0/1 string; give exactly two.")
def correlate_cli(tt_values):
    # Prints the correlation (agreements - disagreements) / 2^n between two functions.
    if len(tt_values) != 2:
        raise click.UsageError(f"Expected exactly two --tt values, got {len(tt_values)}.")

    f = parse_tt_option(tt_values[0])
    g = parse_tt_option(tt_values[1])
    try:
        value = correlation(f, g)
    except DimensionMismatchError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Correlation: {value}")
