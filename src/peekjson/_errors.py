"""
Error taxonomy for peekjson decoding failures.

Every failure raised while reading a document derives from JSONDecodeError,
which carries the source text and the offending position so callers can
report line and column information.
"""

Position = int


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers, and surrounding
    context to help users identify and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


class EndOfInputError(JSONDecodeError):
    """Raised when a read is attempted past the end of the source."""

    def __init__(self, doc: str, pos: Position) -> None:
        super().__init__("Unexpected end of input", doc, pos)


class MissingValueError(JSONDecodeError):
    """An object key is not followed by a colon."""

    def __init__(self, key: str, doc: str, pos: Position) -> None:
        self.key = key
        super().__init__(f"No value found after key {key}", doc, pos)


class NumberSeparatorError(JSONDecodeError):
    """
    A number contains a separator whose section failed to match.

    The separator is either "." (decimal fraction) or "e" (exponent).
    """

    def __init__(
        self, number: str, separator: str, doc: str, pos: Position
    ) -> None:
        self.number = number
        self.separator = separator
        super().__init__(
            f"Number {number} invalid. It includes separator {separator} "
            "but no valid section",
            doc,
            pos,
        )


class MalformedNumberError(JSONDecodeError):
    """The consumed digit run does not match the number grammar."""

    def __init__(self, number: str, doc: str, pos: Position) -> None:
        self.number = number
        super().__init__(f"Not a valid number {number!r}", doc, pos)


class MalformedLiteralError(JSONDecodeError):
    """A literal starting with t, f or n is not true, false or null."""

    def __init__(self, literal: str, doc: str, pos: Position) -> None:
        self.literal = literal
        super().__init__(f"Invalid literal, expected {literal}", doc, pos)


class ArraySeparatorError(JSONDecodeError):
    def __init__(self, char: str, doc: str, pos: Position) -> None:
        self.char = char
        super().__init__(
            "No comma or closing bracket found after array value", doc, pos
        )


class ObjectSeparatorError(JSONDecodeError):
    def __init__(self, char: str, doc: str, pos: Position) -> None:
        self.char = char
        super().__init__(
            "No comma or closing brace found after object field", doc, pos
        )


class UnexpectedTokenError(JSONDecodeError):
    """No value (or object key) can start with the lookahead character."""

    def __init__(
        self, char: str, doc: str, pos: Position, expected: str = "value"
    ) -> None:
        self.char = char
        self.expected = expected
        super().__init__(f"Expecting {expected}, encountered {char!r}", doc, pos)


class InvalidDocumentError(JSONDecodeError):
    """The top-level value is neither an object nor an array."""

    def __init__(self, char: str, doc: str, pos: Position) -> None:
        self.char = char
        super().__init__(f"Not valid JSON, encountered {char!r}", doc, pos)


class TrailingContentError(JSONDecodeError):
    def __init__(self, doc: str, pos: Position) -> None:
        super().__init__("Extra data", doc, pos)


class NestingDepthError(JSONDecodeError):
    def __init__(self, max_depth: int, doc: str, pos: Position) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Maximum nesting depth of {max_depth} exceeded", doc, pos
        )


__all__ = [
    "ArraySeparatorError",
    "EndOfInputError",
    "InvalidDocumentError",
    "JSONDecodeError",
    "MalformedLiteralError",
    "MalformedNumberError",
    "MissingValueError",
    "NestingDepthError",
    "NumberSeparatorError",
    "ObjectSeparatorError",
    "Position",
    "TrailingContentError",
    "UnexpectedTokenError",
]
