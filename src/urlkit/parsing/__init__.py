"""src/urlkit/parsing/__init__.py

Parsing layer for urlkit.

This module provides the URL decomposer, the component formatter and the
path unescaper that the URL value type is built on.
"""

from .decomposer import MAX_URL_LENGTH, Components, UrlParser, decompose
from .escape import unescape_path
from .formatter import Component, format_url

__all__ = [
    "Components",
    "UrlParser",
    "decompose",
    "MAX_URL_LENGTH",
    "Component",
    "format_url",
    "unescape_path",
]
