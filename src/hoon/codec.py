"""Symmetric JSON codec for values plain JSON cannot carry."""

import json
import logging
import re
from datetime import datetime
from typing import Any, Optional
from .types import CodecInterface, EncodeError, ParseError, UNDEFINED, ValueKind
from .error_handler import ErrorHandler
from .transforms.mappings import fmap
from .utils.validation import ValidationUtils
from .value_detector import detect_kind


UNDEFINED_TEXT = "undefined"
NAN_TEXT = "NaN"

# written for an empty pattern, since "//" would not match PATTERN_TEXT_RE
EMPTY_PATTERN_SOURCE = "(?:)"

PATTERN_TEXT_RE = re.compile(r"/.+/", re.DOTALL)
DATE_TEXT_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?"
    r"(?:Z|[+-]\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?)?"
)


class JSONCodec(CodecInterface):
    """
    JSON codec that round-trips ``UNDEFINED``, NaN, compiled patterns
    and datetimes.

    Encoding runs in two stages. A pre-pass replaces every scalar leaf
    with its transport text: ``undefined``, ``NaN``, ``/source/``, an
    ISO-8601 timestamp, or, for ordinary strings, the string encoded as
    a JSON literal a second time. The rebuilt tree is then serialized
    with the standard encoder. Because every ordinary string starts with
    a double quote once double-encoded, it can never collide with a
    sentinel.

    Decoding parses the text and walks the tree bottom-up, so a string
    restored at a leaf is never reinterpreted as a sentinel by an
    enclosing level. Mapping entries and list slots whose value is
    ``UNDEFINED`` are kept.

    Pattern flags are not carried: only the source survives a round trip.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 ensure_ascii: bool = False,
                 max_depth: int = 100):
        """
        Initialize the codec.

        Args:
            logger: Optional logger instance
            error_handler: Optional ErrorHandler instance
            ensure_ascii: Escape non-ASCII characters in transport text
            max_depth: Nesting depth beyond which encoding logs a warning
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
        self.ensure_ascii = ensure_ascii
        self.max_depth = max_depth

    def encode(self, value: Any) -> str:
        """
        Serialize a value to transport text.

        Args:
            value: Value to encode

        Returns:
            Transport text

        Raises:
            EncodeError: If the value lies outside the encodable domain
        """
        validation_result = self.error_handler.validate_value(value, self.max_depth)
        if not validation_result.is_valid:
            message = ValidationUtils.format_errors(validation_result)
            self.logger.error(f"Rejected value for encoding: {message}")
            raise EncodeError(f"Value is not encodable: {message}",
                              context={"errors": validation_result.errors})

        try:
            prepared = self._prepare(value)
            text = json.dumps(prepared, ensure_ascii=self.ensure_ascii,
                              separators=(",", ":"), allow_nan=False)
        except RecursionError as e:
            self.logger.error(f"Value is nested too deeply to encode: {e}")
            raise EncodeError(f"Value is nested too deeply to encode: {e}",
                              context={"max_depth": self.max_depth}) from e

        self.logger.debug(f"Encoded {detect_kind(value).value} value into {len(text)} chars")
        return text

    def decode(self, text: str) -> Any:
        """
        Reconstruct a value from transport text.

        Args:
            text: Transport text produced by ``encode``

        Returns:
            Decoded value

        Raises:
            ParseError: If the text is malformed or was not produced by ``encode``
        """
        validation_result = self.error_handler.validate_input(text)
        if not validation_result.is_valid:
            message = ValidationUtils.format_errors(validation_result)
            self.logger.error(f"Rejected transport text: {message}")
            raise ParseError(f"Invalid transport text: {message}",
                             context={"errors": validation_result.errors})

        try:
            value = self._revive(validation_result.parsed)
        except RecursionError as e:
            self.logger.error(f"Transport text is nested too deeply to decode: {e}")
            raise ParseError(f"Transport text is nested too deeply to decode: {e}") from e

        self.logger.debug(f"Decoded {len(text)} chars into {detect_kind(value).value} value")
        return value

    def _prepare(self, value: Any) -> Any:
        """Replace every scalar leaf with its transport text."""
        kind = detect_kind(value)

        if kind == ValueKind.UNDEFINED:
            return UNDEFINED_TEXT
        elif kind == ValueKind.NAN:
            return NAN_TEXT
        elif kind == ValueKind.PATTERN:
            return f"/{value.pattern or EMPTY_PATTERN_SOURCE}/"
        elif kind == ValueKind.DATE:
            return value.isoformat()
        elif kind == ValueKind.STRING:
            return json.dumps(value, ensure_ascii=self.ensure_ascii)
        elif kind == ValueKind.LIST:
            return [self._prepare(item) for item in value]
        elif kind == ValueKind.MAPPING:
            return fmap(value, lambda val, key: (key, self._prepare(val)))
        return value

    def _revive(self, node: Any) -> Any:
        """Restore sentinels and strings, innermost values first."""
        if isinstance(node, dict):
            return fmap(node, lambda val, key: (key, self._revive(val)))
        elif isinstance(node, list):
            return [self._revive(item) for item in node]
        elif isinstance(node, str):
            return self._revive_text(node)
        return node

    def _revive_text(self, text: str) -> Any:
        """Map one string leaf back to the value it stands for."""
        if text == UNDEFINED_TEXT:
            return UNDEFINED
        if text == NAN_TEXT:
            return float("nan")

        if PATTERN_TEXT_RE.fullmatch(text):
            try:
                return re.compile(text[1:-1])
            except re.error as e:
                raise ParseError(f"Invalid pattern source {text!r}: {e}") from e

        if DATE_TEXT_RE.fullmatch(text):
            try:
                return self._parse_datetime(text)
            except ValueError as e:
                raise ParseError(f"Invalid timestamp {text!r}: {e}") from e

        try:
            original = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"String leaf {text!r} is not double-encoded: {e.msg}") from e

        if not isinstance(original, str):
            raise ParseError(f"String leaf {text!r} does not hold a string literal")
        return original

    @staticmethod
    def _parse_datetime(text: str) -> datetime:
        """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)


_default_codec = JSONCodec()


def encode(value: Any) -> str:
    """Encode a value with the default codec."""
    return _default_codec.encode(value)


def decode(text: str) -> Any:
    """Decode transport text with the default codec."""
    return _default_codec.decode(text)
