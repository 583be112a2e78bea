"""Percent-encoding helpers shared by the parser and the serializer."""

import re
from typing import Optional
from urllib.parse import quote, unquote_to_bytes

# ASCII punctuation left as is when encoding. `#`, `?` and `@` are purl
# delimiters and `%` starts an escape, so those four are always encoded.
# Letters, digits and `-._~` are never encoded by `quote`.
SAFE_CHARACTERS = "!\"&'()*,./:;[\\]{}"

INVALID_SUBPATH_SEGMENTS = ("", ".", "..")

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_encode(text: str) -> str:
    """Percent-encodes `text` as UTF-8 for use inside a purl component.

    Args:
        text: The decoded component value.

    Returns:
        The encoded value, e.g. `"%40angular"` for `"@angular"`.
    """
    return quote(text, safe=SAFE_CHARACTERS, encoding="utf-8", errors="surrogatepass")


def percent_decode(text: str) -> Optional[str]:
    """Decodes percent escapes in `text` at the byte level.

    Args:
        text: An encoded purl component.

    Returns:
        The decoded string, or None if an escape is malformed or the
        decoded bytes are not valid UTF-8.
    """
    if _MALFORMED_ESCAPE.search(text):
        return None
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeDecodeError:
        return None


def is_valid_subpath_segment(segment: str) -> bool:
    return segment not in INVALID_SUBPATH_SEGMENTS


def is_valid_qualifier_key(key: str) -> bool:
    """A qualifier key may only hold ASCII characters other than whitespace."""
    return key.isascii() and not any(char.isspace() for char in key)
