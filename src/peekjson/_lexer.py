"""
Lexical primitives shared by the value, array and object readers.

Each primitive works directly on a LookaheadSource: it marks, reads ahead,
and either commits or resets so the caller sees exactly the characters it
did not consume.
"""

import re

from ._errors import MalformedNumberError
from ._errors import NumberSeparatorError
from ._profile import ProfileContext
from ._source import LookaheadSource

# -digits(.digits(e-?digits)?)? with the fraction and exponent captured
NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+(e-?[0-9]+)?)?")
NUMBER_CHARS = frozenset("-.e0123456789")


class JsonLexer:
    """
    Character-level scanning for whitespace, literals, strings and numbers.

    String scanning copies escaped characters through without decoding them:
    the backslash is dropped and the next character is kept as-is.
    """

    def __init__(self, source: LookaheadSource):
        self.source = source

    def skip_whitespace(self) -> None:
        """Consumes whitespace, leaving the next non-blank character unread."""
        source = self.source
        with ProfileContext("skip_whitespace", source):
            while not source.at_end:
                source.peek_mark()
                if source.read_char().isspace():
                    source.commit()
                else:
                    source.reset()
                    break

    def matches_literal(self, expected: str) -> bool:
        """
        Consumes `expected` if it comes next.

        On a mismatch, or when the input runs out first, nothing is consumed.
        """
        source = self.source
        source.peek_mark()
        for char in expected:
            if source.at_end or source.read_char() != char:
                source.reset()
                return False
        source.commit()
        return True

    def consume_delimited(self, end: str) -> str:
        """Reads up to (and drops) `end`, returning the text before it."""
        source = self.source
        chars: list[str] = []
        with ProfileContext("consume_delimited", source):
            while (char := source.read_char()) != end:
                if char == "\\":
                    char = source.read_char()
                chars.append(char)
        return "".join(chars)

    def consume_number_digits(self) -> str:
        """
        Reads a run of number characters and validates it.

        The run stops at the first character outside "-", digits, "." and
        "e", which is left unread. A run containing "." or "e" whose section
        did not match names that separator in the raised error.
        """
        source = self.source
        start = source.pos
        with ProfileContext("consume_number_digits", source):
            while not source.at_end:
                source.peek_mark()
                if source.read_char() in NUMBER_CHARS:
                    source.commit()
                else:
                    source.reset()
                    break

        digits = source.text[start : source.pos]
        match = NUMBER_PATTERN.match(digits)
        if match is None:
            raise MalformedNumberError(digits, source.text, start)

        decimal, exponent = match.groups()
        for separator, section in ((".", decimal), ("e", exponent)):
            if separator in digits and not section:
                raise NumberSeparatorError(
                    digits, separator, source.text, start
                )

        if match.end() != len(digits):
            raise MalformedNumberError(digits, source.text, start)
        return digits
