"""Tokenizer and parser for node list text such as ``node[00-06],node08``."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import regex

from noderange.errors import InvalidRangeSyntax, MismatchedRangeWidth
from noderange.node import PREFIX_PATTERN, Node, pad, parse_node

DEFAULT_SEPARATORS = ", \t\n\r\v\f"

RANGE_RE = regex.compile(
    rf"(?P<prefix>{PREFIX_PATTERN})\[(?P<start>[0-9]+)-(?P<end>[0-9]+)\]"
)


@dataclass(frozen=True)
class RangeToken:
    """``prefix[start-end]``, with ``start <= end`` and both of equal width."""

    prefix: str
    start: str
    end: str

    @property
    def width(self) -> int:
        return len(self.start)

    def nodes(self) -> Iterator[Node]:
        for value in range(int(self.start), int(self.end) + 1):
            yield Node(prefix=self.prefix, digits=pad(value, self.width))

    def __contains__(self, node: object) -> bool:
        return (
            isinstance(node, Node)
            and node.prefix == self.prefix
            and node.width == self.width
            and int(self.start) <= node.value <= int(self.end)
        )

    def __len__(self) -> int:
        return int(self.end) - int(self.start) + 1

    def __str__(self) -> str:
        return f"{self.prefix}[{self.start}-{self.end}]"


def tokenize(text: str, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    """Split ``text`` on any of ``separators``, dropping empty tokens."""
    if not separators:
        return [text] if text else []
    splitter = regex.compile("[" + regex.escape(separators) + "]+")
    return [token for token in splitter.split(text) if token]


def tokenize_all(
    fragments: str | Iterable[str], separators: str = DEFAULT_SEPARATORS
) -> list[str]:
    if isinstance(fragments, str):
        fragments = [fragments]
    tokens: list[str] = []
    for fragment in fragments:
        tokens.extend(tokenize(fragment, separators))
    return tokens


def parse_token(text: str) -> Node | RangeToken:
    """Parse one token into a literal node or a range.

    Reversed ranges (``node[09-03]``) are put in ascending order.

    Raises:
        InvalidNodeSyntax: the token has no brackets and is not a node name.
        InvalidRangeSyntax: the token has brackets but is not PREFIX[START-END].
        MismatchedRangeWidth: START and END have a different number of digits.
    """
    if "[" not in text and "]" not in text:
        return parse_node(text)

    match = RANGE_RE.fullmatch(text)
    if match is None:
        raise InvalidRangeSyntax(text)
    start, end = match.group("start"), match.group("end")
    if len(start) != len(end):
        raise MismatchedRangeWidth(text, start, end)
    if int(start) > int(end):
        start, end = end, start
    return RangeToken(prefix=match.group("prefix"), start=start, end=end)


__all__ = [
    "DEFAULT_SEPARATORS",
    "RangeToken",
    "tokenize",
    "tokenize_all",
    "parse_token",
]
