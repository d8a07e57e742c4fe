"""
Recursive descent over the lexer's primitives.

read_document accepts only an object or array at the top level. Arrays and
objects recurse through read_value for every element, so nesting depth maps
to interpreter stack depth; ParseConfig.max_depth bounds it.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from ._config import ParseConfig
from ._errors import ArraySeparatorError
from ._errors import InvalidDocumentError
from ._errors import MalformedLiteralError
from ._errors import MissingValueError
from ._errors import NestingDepthError
from ._errors import ObjectSeparatorError
from ._errors import Position
from ._errors import TrailingContentError
from ._errors import UnexpectedTokenError
from ._lexer import JsonLexer
from ._profile import ProfileContext

# Recursive definition of the decoded value tree
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
Document = dict[str, JsonValue] | list[JsonValue]

NUMBER_STARTS = frozenset("-0123456789")

# Leading character -> (full literal, decoded value)
LITERALS: dict[str, tuple[str, bool | None]] = {
    "t": ("true", True),
    "f": ("false", False),
    "n": ("null", None),
}


class JsonParser:
    """
    Builds the value tree from a lexer's source.

    Every array and object is fully built before it is handed to its parent.
    Duplicate object keys keep the last value.
    """

    def __init__(self, lexer: JsonLexer, config: ParseConfig):
        self.lexer = lexer
        self.source = lexer.source
        self.config = config
        self.depth = 0

    @contextmanager
    def _nested(self, start: Position) -> Iterator[None]:
        self.depth += 1
        try:
            max_depth = self.config.max_depth
            if max_depth is not None and self.depth > max_depth:
                raise NestingDepthError(max_depth, self.source.text, start)
            yield
        finally:
            self.depth -= 1

    def read_document(self) -> Document:
        """Reads the top-level object or array."""
        source = self.source
        self.lexer.skip_whitespace()
        start = source.pos
        char = source.read_char()

        result: Document
        if char == "[":
            result = self.read_array(start)
        elif char == "{":
            result = self.read_object(start)
        else:
            raise InvalidDocumentError(char, source.text, start)

        if self.config.strict:
            self.lexer.skip_whitespace()
            if not source.at_end:
                raise TrailingContentError(source.text, source.pos)
        return result

    def read_value(self) -> JsonValue:
        """Dispatches on one lookahead character to the matching reader."""
        source = self.source
        with ProfileContext("read_value", source):
            start = source.pos
            source.peek_mark()
            char = source.read_char()

            if char in NUMBER_STARTS:
                source.reset()
                return self.read_number()
            source.commit()

            if char == "{":
                return self.read_object(start)
            elif char == "[":
                return self.read_array(start)
            elif char == '"':
                return self.lexer.consume_delimited('"')
            elif char in LITERALS:
                literal, value = LITERALS[char]
                if not self.lexer.matches_literal(literal[1:]):
                    raise MalformedLiteralError(literal, source.text, start)
                return value
            else:
                raise UnexpectedTokenError(char, source.text, start)

    def read_number(self) -> float:
        return float(self.lexer.consume_number_digits())

    def read_array(self, start: Position) -> list[JsonValue]:
        """
        Reads array elements after the opening bracket.

        A closing bracket is accepted wherever a value could start, so
        trailing commas are tolerated.
        """
        source = self.source
        lexer = self.lexer
        values: list[JsonValue] = []

        with ProfileContext("read_array", source), self._nested(start):
            while True:
                lexer.skip_whitespace()
                source.peek_mark()
                if source.read_char() == "]":
                    source.commit()
                    return values
                source.reset()

                values.append(self.read_value())

                lexer.skip_whitespace()
                pos = source.pos
                char = source.read_char()
                if char == ",":
                    continue
                if char == "]":
                    return values
                raise ArraySeparatorError(char, source.text, pos)

    def read_object(self, start: Position) -> dict[str, JsonValue]:
        """Reads object attributes after the opening brace."""
        source = self.source
        lexer = self.lexer
        obj: dict[str, JsonValue] = {}

        with ProfileContext("read_object", source), self._nested(start):
            while True:
                lexer.skip_whitespace()
                pos = source.pos
                char = source.read_char()
                if char == "}":
                    return obj
                if char != '"':
                    raise UnexpectedTokenError(
                        char,
                        source.text,
                        pos,
                        expected="property name enclosed in double quotes",
                    )

                key, value = self.read_attribute()
                obj[key] = value

                lexer.skip_whitespace()
                pos = source.pos
                char = source.read_char()
                if char == ",":
                    continue
                if char == "}":
                    return obj
                raise ObjectSeparatorError(char, source.text, pos)

    def read_attribute(self) -> tuple[str, JsonValue]:
        """Reads `key": value` once the key's opening quote is consumed."""
        lexer = self.lexer
        key = lexer.consume_delimited('"')
        lexer.skip_whitespace()
        pos = self.source.pos
        if not lexer.matches_literal(":"):
            raise MissingValueError(key, self.source.text, pos)
        lexer.skip_whitespace()
        return key, self.read_value()
