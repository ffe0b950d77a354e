"""src/urlkit/parsing/decomposer.py

Grammar-driven URL decomposition.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from urlkit.exceptions import InvalidPortError, MalformedUrlError, UrlError
from urlkit.parsing.escape import unescape_path
from urlkit.utils.validators import find_control_character, validate_port

__all__ = ["Components", "UrlParser", "decompose", "MAX_URL_LENGTH"]

logger = logging.getLogger(__name__)

MAX_URL_LENGTH = 65536

TextInput = Union[str, bytes, bytearray, memoryview]

# {scheme}:      (optional)
# //{authority}  (optional, only after a scheme)
_SCHEME_RE = re.compile(r"(?P<scheme>[A-Za-z0-9+.-]+):(?P<slashes>//)?")
_AUTHORITY_RE = re.compile(r"[^/?#]*")

# {path}         (optional, must start with '/')
# ?{query}       (optional)
# #{fragment}    (optional)
_REMAINDER_RE = re.compile(
    r"(?P<path>/[^?#]*)?(?:\?(?P<query>[^#]*))?(?:#(?P<fragment>.*))?"
)


@dataclass(frozen=True)
class Components:
    """
    The fields of a decomposed URL.

    Attributes:
        scheme: Lowercased protocol token, "" if absent.
        user_info: Raw ``user[:password]``, "" if absent.
        host: Host name or literal address, without brackets.
        port: Port digits as written, "" if absent.
        raw_path: Path in escaped form, "" if absent.
        path: ``raw_path`` with percent-escapes decoded.
        query: Query string without the leading '?'.
        fragment: Fragment without the leading '#'.
        is_ipv6_host: True if the host was written in brackets.
    """

    scheme: str = ""
    user_info: str = ""
    host: str = ""
    port: str = ""
    raw_path: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
    is_ipv6_host: bool = False


def _coerce_text(text: TextInput) -> str:
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedUrlError("URL is not valid UTF-8", offset=exc.start) from exc
    raise TypeError(f"URL must be str or bytes, not {type(text).__name__}")


class UrlParser:
    """
    URL decomposer.

    Handles:
    - Scheme recognition (``scheme://`` with authority, ``scheme:`` without).
    - Authority splitting into user info, host (incl. bracketed IPv6) and port.
    - Path, query and fragment extraction.
    - Defensive sizing and control character rejection.
    """

    def __init__(self, max_length: Optional[int] = MAX_URL_LENGTH):
        self.max_length = max_length

    def parse(self, text: TextInput) -> Components:
        """
        Decompose a URL string into its components.

        Args:
            text: URL as str, or as UTF-8 encoded bytes. Error offsets are
                character offsets for str input and byte offsets for bytes.

        Returns:
            The decomposed Components.

        Raises:
            MalformedUrlError: If the input does not match the URL grammar.
            InvalidPortError: If the port is non-numeric or out of range.
            InvalidEscapeError: If the path holds a malformed percent-escape.
            TypeError: If ``text`` is neither str nor bytes-like.
        """
        try:
            decoded = _coerce_text(text)
            try:
                return self._decompose(decoded)
            except UrlError as exc:
                if isinstance(text, str) or exc.offset is None:
                    raise
                # Report offsets into bytes input as byte offsets.
                byte_offset = len(decoded[: exc.offset].encode("utf-8"))
                raise exc.shifted(byte_offset - exc.offset) from exc
        except UrlError as exc:
            logger.debug("URL rejected (%s at offset %s)", exc.kind.value, exc.offset)
            raise

    def _decompose(self, text: str) -> Components:
        if self.max_length is not None and len(text) > self.max_length:
            raise MalformedUrlError(
                f"URL exceeds maximum length of {self.max_length}",
                offset=self.max_length,
            )

        bad = find_control_character(text)
        if bad is not None:
            raise MalformedUrlError(
                f"Control character {text[bad]!r} in URL", offset=bad
            )

        scheme = ""
        user_info = host = port = ""
        is_ipv6_host = False
        pos = 0

        match = _SCHEME_RE.match(text)
        if match:
            scheme = match.group("scheme").lower()
            pos = match.end()
            if match.group("slashes"):
                authority = _AUTHORITY_RE.match(text, pos).group()  # type: ignore[union-attr]
                user_info, host, port, is_ipv6_host = self._split_authority(
                    authority, pos
                )
                pos += len(authority)

        if not match or not match.group("slashes"):
            if not text.startswith("/", pos):
                raise MalformedUrlError(
                    "URL has neither a scheme nor an absolute path", offset=pos
                )

        remainder = _REMAINDER_RE.fullmatch(text, pos)
        if remainder is None:
            raise MalformedUrlError("Unexpected characters after authority", offset=pos)

        raw_path = remainder.group("path") or ""
        try:
            path = unescape_path(raw_path)
        except UrlError as exc:
            raise exc.shifted(pos) from exc

        return Components(
            scheme=scheme,
            user_info=user_info,
            host=host,
            port=port,
            raw_path=raw_path,
            path=path,
            query=remainder.group("query") or "",
            fragment=remainder.group("fragment") or "",
            is_ipv6_host=is_ipv6_host,
        )

    @staticmethod
    def _split_authority(authority: str, base: int) -> Tuple[str, str, str, bool]:
        """
        Split ``user_info@host:port``.

        The user info ends at the last '@'. A bracketed host runs to the
        matching ']'; any other host ends at the first ':'.
        """
        user_info = ""
        hostport = authority
        at = authority.rfind("@")
        if at != -1:
            user_info = authority[:at]
            hostport = authority[at + 1 :]
            base += at + 1

        port: Optional[str]
        if hostport.startswith("["):
            close = hostport.find("]")
            if close == -1:
                raise MalformedUrlError("Unterminated IPv6 literal", offset=base)
            host = hostport[1:close]
            if "[" in host:
                raise MalformedUrlError(
                    "Unexpected '[' in IPv6 literal", offset=base + 1 + host.index("[")
                )
            rest = hostport[close + 1 :]
            if rest and not rest.startswith(":"):
                raise MalformedUrlError(
                    "Unexpected characters after IPv6 literal", offset=base + close + 1
                )
            port = rest[1:] if rest else None
            port_offset = base + close + 2
            is_ipv6_host = True
        else:
            host, sep, port_text = hostport.partition(":")
            for bracket in "[]":
                if bracket in host:
                    raise MalformedUrlError(
                        f"Unexpected {bracket!r} in host",
                        offset=base + host.index(bracket),
                    )
            port = port_text if sep else None
            port_offset = base + len(host) + 1
            is_ipv6_host = False

        if port is not None and not validate_port(port):
            raise InvalidPortError(f"Invalid port {port!r}", offset=port_offset)

        return user_info, host, port or "", is_ipv6_host


_default_parser = UrlParser()


def decompose(text: TextInput) -> Components:
    """Decompose ``text`` with the default parser. See UrlParser.parse."""
    return _default_parser.parse(text)
