class NodeRangeError(ValueError):
    """Base class for everything that can go wrong while parsing node lists."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class InvalidNodeSyntax(NodeRangeError):
    def __init__(self, token: str):
        super().__init__(f"Invalid node name: {token!r}", token)


class InvalidRangeSyntax(NodeRangeError):
    def __init__(self, token: str):
        super().__init__(
            f"Invalid range: {token!r} (expected PREFIX[START-END])", token
        )


class MismatchedRangeWidth(NodeRangeError):
    def __init__(self, token: str, start: str, end: str):
        super().__init__(
            f"Range boundaries {start!r} and {end!r} in {token!r} "
            "must have the same number of digits",
            token,
        )
        self.start = start
        self.end = end


class EmptyInputError(NodeRangeError):
    def __init__(self):
        super().__init__("No nodes or ranges given")


__all__ = [
    "NodeRangeError",
    "InvalidNodeSyntax",
    "InvalidRangeSyntax",
    "MismatchedRangeWidth",
    "EmptyInputError",
]
