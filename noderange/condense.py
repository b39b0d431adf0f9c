"""Folding of node names back into range notation."""

from collections.abc import Iterable, Sequence

from noderange.expand import expand_unique
from noderange.grammar import DEFAULT_SEPARATORS, RangeToken
from noderange.node import Node, is_successor


def find_runs(nodes: Sequence[Node]) -> list[list[Node]]:
    """Partition a sorted, duplicate-free sequence into maximal consecutive runs."""
    runs: list[list[Node]] = []
    i = 0
    while i < len(nodes):
        run = [nodes[i]]
        i += 1
        while i < len(nodes) and is_successor(run[-1], nodes[i]):
            run.append(nodes[i])
            i += 1
        runs.append(run)
    return runs


def format_run(run: Sequence[Node]) -> str:
    first, last = run[0], run[-1]
    if len(run) == 1:
        return str(first)
    return str(RangeToken(prefix=first.prefix, start=first.digits, end=last.digits))


def condense_nodes(nodes: Sequence[Node]) -> str:
    """Render a sorted, duplicate-free sequence as comma-joined ranges."""
    return ",".join(format_run(run) for run in find_runs(nodes))


def condense(
    tokens: str | Iterable[str], separators: str = DEFAULT_SEPARATORS
) -> str:
    """Condense node names and ranges into the shortest range notation.

    Example: condense("node00 node02 node01 node09") ==> "node[00-02],node09"
    """
    return condense_nodes(expand_unique(tokens, separators))


__all__ = ["find_runs", "format_run", "condense_nodes", "condense"]
