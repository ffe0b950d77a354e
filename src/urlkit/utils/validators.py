"""src/urlkit/utils/validators.py

Validation utilities for urlkit.
"""

import re
from typing import Optional

MAX_PORT = 65535

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def validate_port(port: str) -> bool:
    """Check that ``port`` is all ASCII digits with a value in [0, 65535]."""
    if not port or not (port.isascii() and port.isdigit()):
        return False
    significant = port.lstrip("0")
    # More than five significant digits is always out of range.
    if len(significant) > len(str(MAX_PORT)):
        return False
    return int(significant or "0") <= MAX_PORT


def find_control_character(text: str) -> Optional[int]:
    """Return the offset of the first ASCII control character, or None."""
    match = _CONTROL_RE.search(text)
    return match.start() if match else None
