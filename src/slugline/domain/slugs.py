"""Composite slug encoding and decoding.

A composite slug is ``<token>-<identifier>``: the normalized display name
of an entity followed by its identifier in the last ``-``-separated
segment.  The name portion is decoration; only the identifier resolves.

INVARIANT: The identifier is always read from the *last* segment, never
located by searching for the delimiter.  Tokens may contain the delimiter.

Two failure conventions, chosen by how far the caller trusts the input:
- Untrusted (URL) input: :meth:`SlugCodec.decode_trailing_integer`
  returns ``INVALID_ID`` (-1), or ``None`` via ``parse_trailing_integer``.
- Internal navigation state: :meth:`SlugCodec.decode_trailing_index` and
  :meth:`SlugCodec.decode_trailing_uid` propagate ``math.nan``.

No operation raises for malformed input.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

from slugline.domain.normalize import Normalizer, normalize_name

logger = logging.getLogger(__name__)

DELIMITER = "-"
INVALID_ID = -1

# Leading whitespace, optional sign, decimal digits; the rest is ignored.
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_NUMERIC_SEGMENT = re.compile(r"[0-9]+")


def parse_int_prefix(text: str) -> int | None:
    """Parse the leading decimal integer of *text*.

    Returns None when *text* does not start with digits (after optional
    whitespace and sign), or when the digit run is too long for the
    interpreter's int-from-string limit.

    Examples:
        >>> parse_int_prefix("42")
        42
        >>> parse_int_prefix("12abc")
        12
        >>> parse_int_prefix(" -3")
        -3
        >>> parse_int_prefix("abc") is None
        True
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


@dataclass(frozen=True)
class SlugCodec:
    """Encoder/decoder for composite slugs.

    Attributes:
        normalize: Turns a display name into a URL-safe token.
        delimiter: Join delimiter between token and identifier.
    """

    normalize: Normalizer = field(default=normalize_name)
    delimiter: str = DELIMITER

    # --- Encoding ---

    def join(self, token: str, identifier: int | str) -> str:
        """Join an already-normalized *token* and *identifier*."""
        if _NUMERIC_SEGMENT.fullmatch(token.rsplit(self.delimiter, 1)[-1]):
            logger.debug("Token %r ends with a numeric segment", token)
        return f"{token}{self.delimiter}{identifier}"

    def encode(self, name: str, identifier: int | str) -> str:
        """Encode *name* and *identifier* as ``<normalize(name)>-<identifier>``.

        The identifier is stringified as-is; delimiters inside it are not
        escaped.
        """
        return self.join(self.normalize(name), identifier)

    def encode_index(self, name: str, index: int) -> str:
        """Encode a 0-based sequence position as a 1-based slug."""
        return self.encode(name, index + 1)

    def encode_verbatim(self, token: str) -> str:
        """Return a pre-formed identifier token unchanged."""
        return token

    # --- Decoding ---

    def segments(self, slug: str) -> list[str]:
        """Split *slug* on the delimiter.  Always returns at least one segment."""
        return slug.split(self.delimiter)

    def decode_trailing_identifier_string(self, slug: str) -> str:
        """Return the last segment of *slug* verbatim."""
        return self.segments(slug)[-1]

    def parse_trailing_integer(self, slug: str) -> int | None:
        """Parse the last segment as a non-negative integer, or return None."""
        value = parse_int_prefix(self.decode_trailing_identifier_string(slug))
        if value is None or value < 0:
            return None
        return value

    def decode_trailing_integer(self, slug: str) -> int:
        """Parse the last segment as a non-negative integer.

        Returns ``INVALID_ID`` (-1) when the segment is not numeric or is
        negative.  Callers must check for it before using the result as a
        lookup key.
        """
        value = self.parse_trailing_integer(slug)
        return INVALID_ID if value is None else value

    def decode_trailing_uid(self, slug: str) -> int | float:
        """Parse the last segment as an integer; ``math.nan`` if not numeric."""
        value = parse_int_prefix(self.decode_trailing_identifier_string(slug))
        return math.nan if value is None else value

    def decode_trailing_index(self, slug: str) -> int | float:
        """Inverse of :meth:`encode_index`: the last segment minus one.

        A non-numeric segment yields ``math.nan``.
        """
        return self.decode_trailing_uid(slug) - 1

    def decode_residual_name(self, slug: str) -> str:
        """Drop the identifier segment and rejoin the rest."""
        return self.delimiter.join(self.segments(slug)[:-1])


DEFAULT_CODEC = SlugCodec()

encode = DEFAULT_CODEC.encode
encode_index = DEFAULT_CODEC.encode_index
encode_verbatim = DEFAULT_CODEC.encode_verbatim
decode_trailing_integer = DEFAULT_CODEC.decode_trailing_integer
parse_trailing_integer = DEFAULT_CODEC.parse_trailing_integer
decode_trailing_identifier_string = DEFAULT_CODEC.decode_trailing_identifier_string
decode_trailing_index = DEFAULT_CODEC.decode_trailing_index
decode_trailing_uid = DEFAULT_CODEC.decode_trailing_uid
decode_residual_name = DEFAULT_CODEC.decode_residual_name
