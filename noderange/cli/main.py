import sys
from pathlib import Path

import rich
import rich.markup
import rich.table

import noderange.utils.click as click
import noderange.utils.flags
from noderange.cli.selftest import run_selftest
from noderange.condense import condense
from noderange.expand import expand, expand_unique, is_node_in_range
from noderange.utils.io import read_stdin_tokens
from noderange.utils.logger import LOGGER, set_level

# region Helpers


def _read_tokens(tokens: tuple[str, ...]) -> list[str]:
    if tokens == ("-",):
        tokens = tuple(read_stdin_tokens(sys.stdin))
        LOGGER.debug("Read %d line(s) from stdin", len(tokens))
    return list(tokens)


TOKENS_ARGUMENT = click.argument("tokens", nargs=-1, type=str)

# endregion


@click.group(help="Convert between node lists and compact range notation")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log token and node counts to stderr.",
)
def cli(verbose: bool):
    if verbose:
        set_level("DEBUG")


@click.command(
    "expand",
    parent=cli,
    help="Expand ranges into individual node names (r2n)",
)
@TOKENS_ARGUMENT
@click.option(
    "--unique",
    "-u",
    is_flag=True,
    help="Sort the nodes and drop duplicates.",
)
@click.option(
    "--separator",
    "-s",
    default=noderange.utils.flags.get_separator(),
    type=str,
    help="String printed between node names.",
)
def expand_command(tokens: tuple[str, ...], unique: bool, separator: str):
    tokens = _read_tokens(tokens)
    nodes = expand_unique(tokens) if unique else expand(tokens)
    LOGGER.debug("Expanded %d argument(s) into %d node(s)", len(tokens), len(nodes))
    click.echo(separator.join(str(node) for node in nodes))


@click.command(
    "condense",
    parent=cli,
    help="Condense node names into range notation (n2r)",
)
@TOKENS_ARGUMENT
def condense_command(tokens: tuple[str, ...]):
    tokens = _read_tokens(tokens)
    condensed = condense(tokens)
    LOGGER.debug("Condensed %d argument(s) into %r", len(tokens), condensed)
    click.echo(condensed)


@click.command(
    "contains",
    parent=cli,
    help="Print whether TARGET is one of the nodes in the range; exits 1 if not",
)
@click.argument("target", type=str)
@TOKENS_ARGUMENT
def contains_command(target: str, tokens: tuple[str, ...]):
    found = is_node_in_range(target, _read_tokens(tokens))
    click.echo("true" if found else "false")
    if not found:
        sys.exit(1)


@click.command(
    "count",
    parent=cli,
    help="Print the number of distinct nodes in the range",
)
@TOKENS_ARGUMENT
def count_command(tokens: tuple[str, ...]):
    click.echo(str(len(expand_unique(_read_tokens(tokens)))))


@click.command(
    "selftest",
    parent=cli,
    help="Run the built-in expansion and condensation checks",
)
def selftest_command():
    results = run_selftest()
    table = rich.table.Table()
    table.add_column("Check")
    table.add_column("Result")
    table.add_column("Got")
    for result in results:
        table.add_row(
            result.case.name,
            "[green]ok[/green]" if result.passed else "[red]FAILED[/red]",
            "" if result.passed else rich.markup.escape(repr(result.actual)),
        )
    rich.print(table)
    failures = [result for result in results if not result.passed]
    if failures:
        raise click.ClickException(f"{len(failures)} of {len(results)} checks failed")
    rich.print(f"[green]All {len(results)} checks passed[/green]")


INVOCATIONS = {
    "r2n": expand_command,
    "n2r": condense_command,
}


def main():
    """Entry point for ``noderange``, ``r2n`` and ``n2r``, picked by program name."""
    program = Path(sys.argv[0]).name
    command = INVOCATIONS.get(program, cli)
    LOGGER.debug("Dispatching %s to %s", program, command.name)
    command()


if __name__ == "__main__":
    main()
