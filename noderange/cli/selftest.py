"""Built-in smoke tests, runnable on any install with ``noderange selftest``."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from noderange.condense import condense
from noderange.errors import (
    EmptyInputError,
    InvalidNodeSyntax,
    InvalidRangeSyntax,
    MismatchedRangeWidth,
    NodeRangeError,
)
from noderange.expand import expand, expand_unique, is_node_in_range
from noderange.node import is_successor, parse_node


@dataclass
class SelftestCase:
    name: str
    run: Callable[[], Any]
    expected: Any


@dataclass
class SelftestResult:
    case: SelftestCase
    actual: Any

    @property
    def passed(self) -> bool:
        return self.actual == self.case.expected


def _names(nodes) -> list[str]:
    return [str(node) for node in nodes]


CASES = [
    SelftestCase(
        "expand keeps token order and widths",
        lambda: _names(expand("node00,node0000,node[000-088]")),
        ["node00", "node0000"] + [f"node{i:03d}" for i in range(89)],
    ),
    SelftestCase(
        "expand swaps reversed ranges",
        lambda: _names(expand("cn[05-03]")),
        ["cn03", "cn04", "cn05"],
    ),
    SelftestCase(
        "expand_unique sorts and drops duplicates",
        lambda: _names(expand_unique("n03 n[01-03] n1 n02")),
        ["n1", "n01", "n02", "n03"],
    ),
    SelftestCase(
        "condense unsorted nodes",
        lambda: condense(
            ["node00", "node02", "node01", "node09", "node12", "node03", "node07", "node06"]
        ),
        "node[00-03],node[06-07],node09,node12",
    ),
    SelftestCase(
        "condense mixed prefixes",
        lambda: condense("gpu_[1-2],gpu-07,gpu[08-09],gpu-[05-06]"),
        "gpu[08-09],gpu-[05-07],gpu_[1-2]",
    ),
    SelftestCase(
        "condense cuts ranges at a width change",
        lambda: condense("node[97-99],node100"),
        "node[97-99],node100",
    ),
    SelftestCase(
        "node099 is followed by node100",
        lambda: is_successor(parse_node("node099"), parse_node("node100")),
        True,
    ),
    SelftestCase(
        "node99 is not followed by node100",
        lambda: is_successor(parse_node("node99"), parse_node("node100")),
        False,
    ),
    SelftestCase(
        "node-02 is outside a gapped range",
        lambda: is_node_in_range(
            "node-02", "node-[00-01],node-[03-03],node-04,othernodes0000"
        ),
        False,
    ),
    SelftestCase(
        "node-00 is inside node-[00-63]",
        lambda: is_node_in_range("node-00", "node-[00-63]"),
        True,
    ),
    SelftestCase(
        "ranges need equal widths",
        lambda: expand("node[0-999]"),
        MismatchedRangeWidth,
    ),
    SelftestCase("brackets must be closed", lambda: expand("node[1-2"), InvalidRangeSyntax),
    SelftestCase("names need a numeric suffix", lambda: expand("node"), InvalidNodeSyntax),
    SelftestCase("empty input is rejected", lambda: condense(" , "), EmptyInputError),
]


def run_case(case: SelftestCase) -> SelftestResult:
    try:
        actual = case.run()
    except NodeRangeError as e:
        actual = type(e)
    return SelftestResult(case=case, actual=actual)


def run_selftest(cases: list[SelftestCase] | None = None) -> list[SelftestResult]:
    return [run_case(case) for case in (CASES if cases is None else cases)]
