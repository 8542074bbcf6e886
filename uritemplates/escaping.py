"""Percent-encoding for expanded values.

Two character classes are in play:

- unreserved: ``A-Z a-z 0-9 - . _ ~``
- reserved-allowed: unreserved plus ``: / ? # [ ] @ ! $ & ' ( ) * + , ; =``

Every byte of the UTF-8 encoding that falls outside the chosen class is
written as ``%XX`` with uppercase hex digits.
"""

import re

UNRESERVED = "A-Za-z0-9\\-._~"
RESERVED = ":/?#\\[\\]@!$&'()*+,;="

_NOT_UNRESERVED = re.compile(f"[^{UNRESERVED}]".encode())
_NOT_RESERVED_ALLOWED = re.compile(f"[^{UNRESERVED}{RESERVED}]".encode())


def _pct_encode(match: re.Match[bytes]) -> bytes:
    return b"".join(b"%%%02X" % byte for byte in match.group())


def _encode(text: str) -> bytes:
    # Undecodable bytes (from bytes values) map back to themselves; other lone
    # surrogates are written as their UTF-8 style triplet.
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", errors="surrogatepass")


def escape(text: str, allow_reserved: bool = False) -> str:
    """Percent-encode ``text`` for inclusion in a URI.

    Args:
        text: Value to encode.
        allow_reserved: Leave RFC 3986 reserved characters as-is (used by the
            ``+`` and ``#`` operators).

    Example:
        >>> escape("Hello World!")
        'Hello%20World%21'
        >>> escape("/foo/bar", allow_reserved=True)
        '/foo/bar'
    """
    pattern = _NOT_RESERVED_ALLOWED if allow_reserved else _NOT_UNRESERVED
    raw = _encode(text)
    if not pattern.search(raw):
        return text
    return pattern.sub(_pct_encode, raw).decode("ascii")


__all__ = ["RESERVED", "UNRESERVED", "escape"]
