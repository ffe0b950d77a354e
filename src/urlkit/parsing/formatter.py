"""src/urlkit/parsing/formatter.py

Serialization of URL components back to a string.
"""

from enum import IntFlag
from typing import TYPE_CHECKING, List, Union

if TYPE_CHECKING:  # pragma: no cover
    from urlkit.url import URL

__all__ = ["Component", "format_url"]


class Component(IntFlag):
    """Components of a URL, combinable as a mask for ``format_url``."""

    SCHEME = 1
    USER_INFO = 2
    HOST = 4
    PORT = 8
    PATH = 16
    QUERY = 32
    FRAGMENT = 64
    ALL = SCHEME | USER_INFO | HOST | PORT | PATH | QUERY | FRAGMENT


def format_url(url: "URL", components: Union[Component, int] = Component.ALL) -> str:
    """
    Convert a URL to its string representation.

    Components are emitted in canonical order. A separator is only written
    when the parts on both sides of it are present, so a partial mask never
    leaves a dangling ':' or '@'. Default ports are never written out.

    Args:
        url: The URL to format.
        components: Mask of Component flags selecting what to include.

    Returns:
        The formatted string; "" for an empty mask.

    Example:
        >>> format_url(URL("http://[::1]:8080/x"), Component.HOST | Component.PORT)
        '[::1]:8080'
    """
    components = Component(components)
    with_host = Component.HOST in components
    parts: List[str] = []

    if Component.USER_INFO in components and url.user_info:
        parts.append(url.user_info)
        if with_host:
            parts.append("@")

    if with_host:
        parts.append(f"[{url.host}]" if url.is_ipv6_host else url.host)

    if Component.PORT in components and url.raw_port:
        parts.append(f":{url.raw_port}")

    raw_path = url.raw_path
    if Component.PATH in components and raw_path:
        if not raw_path.startswith("/"):
            parts.append("/")
        parts.append(raw_path)

    if Component.QUERY in components and url.query:
        parts.append(f"?{url.query}")

    if Component.FRAGMENT in components and url.fragment:
        parts.append(f"#{url.fragment}")

    rest = "".join(parts)
    if Component.SCHEME not in components or not url.scheme:
        return rest

    if with_host:
        return f"{url.scheme}://{rest}"
    if rest:
        return f"{url.scheme}:{rest}"
    return url.scheme
