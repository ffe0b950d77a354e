"""src/urlkit/parsing/escape.py

Percent-escape handling for URL paths.
"""

import re

from urlkit.exceptions import InvalidEscapeError

__all__ = ["unescape_path"]

# A '%' that does not start a two-hex-digit escape.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ESCAPE_RUN_RE = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def _decode_run(match: "re.Match[str]") -> str:
    octets = bytes.fromhex(match.group().replace("%", ""))
    return octets.decode("utf-8", "surrogateescape")


def unescape_path(raw: str) -> str:
    """
    Decode ``%XX`` escapes in a URL path.

    Only percent-escapes are decoded: '+' and every other character are
    passed through unchanged, since this is not query-string decoding.
    Consecutive escapes are decoded together as UTF-8, with undecodable
    octets kept as surrogate escapes so no data is lost.

    Args:
        raw: Path in escaped form.

    Returns:
        The unescaped path. Empty input yields an empty string.

    Raises:
        InvalidEscapeError: If a '%' is not followed by exactly two hex
            digits. The error offset is relative to ``raw``.
    """
    if "%" not in raw:
        return raw

    bad = _BAD_ESCAPE_RE.search(raw)
    if bad is not None:
        pos = bad.start()
        raise InvalidEscapeError(
            f"Invalid percent-escape {raw[pos:pos + 3]!r} in path", offset=pos
        )

    return _ESCAPE_RUN_RE.sub(_decode_run, raw)
