"""
Recursive-descent JSON reader with single-character lookahead.

Decodes an object or array document into plain Python values: dicts, lists,
str, float, bool and None. Every number becomes a float and string escapes
are copied through without being decoded.
"""

import logging
import os
from pathlib import Path
from typing import IO
from typing import Any

from ._config import DEFAULT_MAX_DEPTH
from ._config import ParseConfig
from ._errors import ArraySeparatorError
from ._errors import EndOfInputError
from ._errors import InvalidDocumentError
from ._errors import JSONDecodeError
from ._errors import MalformedLiteralError
from ._errors import MalformedNumberError
from ._errors import MissingValueError
from ._errors import NestingDepthError
from ._errors import NumberSeparatorError
from ._errors import ObjectSeparatorError
from ._errors import Position
from ._errors import TrailingContentError
from ._errors import UnexpectedTokenError
from ._lexer import JsonLexer
from ._parser import Document
from ._parser import JsonParser
from ._parser import JsonValue
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._source import LookaheadSource

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _parse_document(s: str, config: ParseConfig) -> Document:
    """
    Runs one parse over `s`.

    The source is opened here and nowhere else; nested readers share it.
    """
    with LookaheadSource(s) as source:
        parser = JsonParser(JsonLexer(source), config)
        return parser.read_document()


def loads(s: str, **kwargs: Any) -> Document:
    """
    Parses a JSON object or array from a string.

    Keyword arguments build a ParseConfig. Content after the closing
    delimiter of the document is ignored unless strict=True.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    logger.debug("parsing %d characters (strict=%s)", len(s), config.strict)
    return _parse_document(s, config)


def load(fp: IO[str], **kwargs: Any) -> Document:
    """
    Parses JSON from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def load_path(
    path: str | os.PathLike[str], *, encoding: str | None = None, **kwargs: Any
) -> Document:
    """
    Reads the file at `path`, trims surrounding whitespace and parses it.

    Raises FileNotFoundError unless `path` is an existing file. It is
    decoded with `encoding`, or the platform default when omitted.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"No such JSON file: {str(path)!r}")

    logger.debug("loading JSON document from %s", file_path)
    text = file_path.read_text(encoding=encoding)
    return loads(text.strip(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ArraySeparatorError",
    "Document",
    "EndOfInputError",
    "HotPathStats",
    "InvalidDocumentError",
    "JSONDecodeError",
    "JsonLexer",
    "JsonParser",
    "JsonValue",
    "LookaheadSource",
    "MalformedLiteralError",
    "MalformedNumberError",
    "MissingValueError",
    "NestingDepthError",
    "NumberSeparatorError",
    "ObjectSeparatorError",
    "ParseConfig",
    "Position",
    "TrailingContentError",
    "UnexpectedTokenError",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "load_path",
    "loads",
]
