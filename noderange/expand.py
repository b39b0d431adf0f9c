"""Expansion of node list tokens into individual nodes."""

from collections.abc import Iterable

from noderange.errors import EmptyInputError
from noderange.grammar import DEFAULT_SEPARATORS, RangeToken, parse_token, tokenize_all
from noderange.node import Node, parse_node


def parse_tokens(
    tokens: str | Iterable[str], separators: str = DEFAULT_SEPARATORS
) -> list[Node | RangeToken]:
    """Parse every token up front, so one bad token fails the whole call."""
    raw_tokens = tokenize_all(tokens, separators)
    if not raw_tokens:
        raise EmptyInputError()
    return [parse_token(raw) for raw in raw_tokens]


def expand(
    tokens: str | Iterable[str], separators: str = DEFAULT_SEPARATORS
) -> list[Node]:
    """Expand literal nodes and ranges into a flat list of nodes.

    Nodes come out in the order their tokens appear, ascending inside each
    range. The result is neither sorted across tokens nor deduplicated.

    Example: expand("n[09-11],d01") ==> [n09, n10, n11, d01]

    Raises:
        EmptyInputError: if ``tokens`` contains no tokens at all.
        NodeRangeError: for the first token that fails to parse.
    """
    nodes: list[Node] = []
    for token in parse_tokens(tokens, separators):
        if isinstance(token, RangeToken):
            nodes.extend(token.nodes())
        else:
            nodes.append(token)
    return nodes


def sort_nodes(nodes: Iterable[Node]) -> list[Node]:
    return sorted(nodes, key=lambda node: node.sort_key)


def dedup(sorted_nodes: Iterable[Node]) -> list[Node]:
    """Drop repeated nodes from an already sorted sequence."""
    unique: list[Node] = []
    for node in sorted_nodes:
        if not unique or unique[-1] != node:
            unique.append(node)
    return unique


def expand_unique(
    tokens: str | Iterable[str], separators: str = DEFAULT_SEPARATORS
) -> list[Node]:
    return dedup(sort_nodes(expand(tokens, separators)))


def is_node_in_range(
    target: str, tokens: str | Iterable[str], separators: str = DEFAULT_SEPARATORS
) -> bool:
    """Check whether the node named ``target`` is one of the nodes in ``tokens``.

    Ranges are checked by bounds, without expanding them. Width counts:
    ``node2`` is not in ``node[00-09]``.
    """
    node = parse_node(target)
    for token in parse_tokens(tokens, separators):
        if isinstance(token, RangeToken):
            if node in token:
                return True
        elif token == node:
            return True
    return False


__all__ = [
    "parse_tokens",
    "expand",
    "sort_nodes",
    "dedup",
    "expand_unique",
    "is_node_in_range",
]
