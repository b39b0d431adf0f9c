"""Node names of the form PREFIX + DIGITS, and the canonical order between them.

The digit run is kept exactly as written, so ``node9`` and ``node09`` are two
different nodes: the suffix width is part of a node's identity.
"""

import functools
from dataclasses import dataclass

import regex
from strenum import StrEnum

from noderange.errors import InvalidNodeSyntax

PREFIX_PATTERN = r"[A-Za-z_]+[-_]?"
NODE_RE = regex.compile(rf"(?P<prefix>{PREFIX_PATTERN})(?P<digits>[0-9]+)")


class Ordering(StrEnum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


def pad(value: int, width: int) -> str:
    return str(value).zfill(width)


@functools.total_ordering
@dataclass(frozen=True)
class Node:
    prefix: str
    digits: str

    @property
    def width(self) -> int:
        return len(self.digits)

    @property
    def value(self) -> int:
        return int(self.digits)

    @property
    def sort_key(self) -> tuple[str, int, int]:
        return self.prefix, self.width, self.value

    def __lt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.prefix + self.digits


def parse_node(text: str) -> Node:
    """Split a node name into its prefix and zero-padded numeric suffix.

    Raises:
        InvalidNodeSyntax: if ``text`` is not letters/underscores, an optional
            single ``-`` or ``_`` separator, then one or more digits.
    """
    match = NODE_RE.fullmatch(text)
    if match is None:
        raise InvalidNodeSyntax(text)
    return Node(prefix=match.group("prefix"), digits=match.group("digits"))


def compare(a: Node, b: Node) -> Ordering:
    """Compare by prefix, then suffix width, then suffix value."""
    if a.sort_key < b.sort_key:
        return Ordering.LESS
    if a.sort_key > b.sort_key:
        return Ordering.GREATER
    return Ordering.EQUAL


def is_successor(a: Node, b: Node) -> bool:
    """True if ``b`` directly follows ``a`` inside a single range.

    The increment must not carry into an extra digit: ``node99`` is never
    followed by ``node100``, while ``node099`` is.
    """
    if a.prefix != b.prefix or a.width != b.width:
        return False
    following = pad(a.value + 1, a.width)
    return len(following) == a.width and following == b.digits


__all__ = ["Node", "Ordering", "parse_node", "compare", "is_successor", "pad"]
