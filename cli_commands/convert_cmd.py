import click
from cli_commands.cli_utils import parse_tt_option
from representations.truth_table_representation import TruthTableRepresentation


@click.command("convert")
@click.option("--tt", "tt_str", required=True,
              help="Truth table as a 0/1 string of length 2^n, f(0) first.")
@click.option("--form", "normal_form", default="anf", show_default=True,
              type=click.Choice(["dnf", "cnf", "anf"], case_sensitive=False),
              help="Normal form to print.")
@click.option("--clauses", "show_clauses", is_flag=True,
              help="Print the raw clause list (signed literals, or variable indices for ANF).")
def convert_cli(tt_str, normal_form, show_clauses):
    # Prints the DNF, CNF or ANF of a single function.
    function = parse_tt_option(tt_str)
    representation = TruthTableRepresentation(function)

    converters = {
        "dnf": representation.to_dnf,
        "cnf": representation.to_cnf,
        "anf": representation.to_anf,
    }
    converted = converters[normal_form.lower()]()

    click.echo(f"{normal_form.upper()} of {function.to_bit_string()} (n={function.variable_count}):")
    if show_clauses:
        click.echo(repr([list(clause) for clause in converted.clauses]))
    else:
        click.echo(converted.to_string())
    if normal_form.lower() == "anf":
        click.echo(f"Algebraic degree: {converted.degree}")
