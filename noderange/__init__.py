from noderange.condense import condense, condense_nodes, find_runs
from noderange.errors import (
    EmptyInputError,
    InvalidNodeSyntax,
    InvalidRangeSyntax,
    MismatchedRangeWidth,
    NodeRangeError,
)
from noderange.expand import dedup, expand, expand_unique, is_node_in_range, sort_nodes
from noderange.grammar import RangeToken, parse_token, tokenize
from noderange.node import Node, Ordering, compare, is_successor, parse_node

__all__ = [
    "Node",
    "Ordering",
    "RangeToken",
    "parse_node",
    "compare",
    "is_successor",
    "tokenize",
    "parse_token",
    "expand",
    "sort_nodes",
    "dedup",
    "expand_unique",
    "is_node_in_range",
    "find_runs",
    "condense_nodes",
    "condense",
    "NodeRangeError",
    "InvalidNodeSyntax",
    "InvalidRangeSyntax",
    "MismatchedRangeWidth",
    "EmptyInputError",
]
