import click
from cli_commands.cli_utils import parse_tt_option
from computations.spectra.autocorrelation import autocorrelation_spectrum
from computations.tables.lat import LAT_METHODS
from computations.transforms.walsh import walsh_transform
from registry import REG
from storage_pandas import table_dataframe, save_dataframe_csv

# Tables above this variable count are refused unless --force is given.
MAX_TABLE_VARIABLES = 10


@click.command("table")
@click.option("--tt", "tt_str", required=True,
              help="Truth table as a 0/1 string of length 2^n, f(0) first.")
@click.option("--kind", default="walsh", show_default=True,
              type=click.Choice(["ddt", "lat", "walsh", "autocorrelation"], case_sensitive=False),
              help="Which table or spectrum to compute.")
@click.option("--lat-method", default="direct", show_default=True,
              type=click.Choice(list(LAT_METHODS), case_sensitive=False),
              help="LAT evaluation: the direct definition, or derived from the Walsh spectrum.")
@click.option("--output", "output_path", default=None, type=click.Path(dir_okay=False, writable=True),
              help="Write the table to this CSV file instead of printing it.")
@click.option("--force", is_flag=True,
              help=f"Allow DDT/LAT for more than {MAX_TABLE_VARIABLES} variables.")
def table_cli(tt_str, kind, lat_method, output_path, force):
    # Computes a DDT, LAT, Walsh or autocorrelation table for one function.
    function = parse_tt_option(tt_str)
    kind = kind.lower()
    size = function.size

    if kind in ("ddt", "lat") and function.variable_count > MAX_TABLE_VARIABLES and not force:
        raise click.ClickException(
            f"{kind.upper()} of a {function.variable_count}-variable function is large; pass --force to compute it.")

    if kind == "ddt":
        table = REG.get("table", "ddt")(function)
        dataframe = table_dataframe(table, "delta", ["0", "1"])
    elif kind == "lat":
        table = REG.get("table", "lat")(function, method=lat_method.lower())
        dataframe = table_dataframe(table, "a", [str(mask) for mask in range(size)])
    elif kind == "walsh":
        dataframe = table_dataframe(walsh_transform(function)[:, None], "a", ["walsh"])
    else:
        dataframe = table_dataframe(autocorrelation_spectrum(function)[:, None], "a", ["autocorrelation"])

    if output_path:
        save_dataframe_csv(dataframe, output_path)
        click.echo(f"{kind.upper()} saved to {output_path}")
    else:
        click.echo(dataframe.to_string())
