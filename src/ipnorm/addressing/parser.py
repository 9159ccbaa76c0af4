"""Endpoint parsing for loosely formatted address strings.

This module turns text like the following into an Endpoint:
    10.0.0.1                        # Plain IPv4
    192.168.1.1:80                  # IPv4 with port
    [2001:db8::1]:443               # Bracketed IPv6 with port
    fe80::1ff:fe23:4567:890a%eth2   # Scoped IPv6 (zone dropped)
    http://10.0.0.1:8080            # Protocol scheme (stripped)
    tcp6:[::1]:22                   # Socket-notation prefix (stripped)

Whitespace anywhere in the input is ignored. An IPv6 address can only be
paired with a port using brackets.
"""

import re
from ipaddress import IPv4Address, IPv6Address
from typing import Optional

from .types import V4, V6, Endpoint, IpVersion

_MAX_PORT = 0xFFFF
_MAX_SCOPE_ID = 0xFFFFFFFF

_SOCKET_V4 = re.compile(r"(?P<host>[0-9.]+):(?P<port>[0-9]+)")
_SOCKET_V6 = re.compile(
    r"\[(?P<host>[0-9A-Fa-f:.]+)(?:%(?P<scope>[0-9]+))?\]:(?P<port>[0-9]+)"
)


class EndpointParseError(ValueError):
    """Input does not name an IP address with an optional port."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


def parse_endpoint(raw: str) -> Endpoint:
    """Parse an IP address with an optional port.

    This is the main entry point. Stages run in a fixed order and the
    first one that recognizes the input wins.

    Args:
        raw: Raw endpoint string

    Returns:
        Parsed Endpoint; port is None when the input had none

    Raises:
        EndpointParseError: If no stage recognizes the input

    Examples:
        >>> parse_endpoint("10.0.0.1")
        Endpoint(address=V4(address=IPv4Address('10.0.0.1')), port=None)

        >>> parse_endpoint("https://[2001:db8::1]:80")
        Endpoint(address=V6(address=IPv6Address('2001:db8::1')), port=80)
    """
    # Steps 1-3: normalize the working string
    text = _strip_whitespace(raw)
    text = _strip_scheme(text)
    text = _strip_socket_prefix(text)

    # Step 4: address:port or [address]:port
    endpoint = _parse_socket_address(text)
    if endpoint is not None:
        return endpoint

    # Step 5: brackets are an unambiguous IPv6 marker, so fail here
    if text.startswith("[") and text.endswith("]"):
        inner = text[1:-1]
        v6 = _parse_ipv6(inner)
        if v6 is None:
            raise EndpointParseError(
                f"Invalid IPv6 address in brackets: {inner}", inner
            )
        return Endpoint(V6(v6))

    # Step 6: scoped IPv6, zone discarded
    if "%" in text:
        v6 = _parse_ipv6(text.split("%", 1)[0])
        if v6 is not None:
            return Endpoint(V6(v6))

    # Step 7: bare IPv4 or IPv6 literal
    version = _parse_ip(text)
    if version is not None:
        return Endpoint(version)

    raise EndpointParseError(f"Invalid IP address: {text}", text)


def _strip_whitespace(text: str) -> str:
    """Remove whitespace everywhere, including inside literals.

    Examples:
        >>> _strip_whitespace(" 192 . 168 . 1 . 1 ")
        "192.168.1.1"
    """
    return "".join(c for c in text if not c.isspace())


def _strip_scheme(text: str) -> str:
    """Drop everything up to and including the first "://".

    Examples:
        >>> _strip_scheme("https://10.0.0.1:443")
        "10.0.0.1:443"
    """
    _, sep, rest = text.partition("://")
    return rest if sep else text


def _strip_socket_prefix(text: str) -> str:
    """Drop a socket-notation tag such as "inet:", "tcp4:" or "tcp6:".

    The tag is only stripped when what follows looks like an address
    (contains "." or ":", or starts with "["). A lone "host:port" keeps
    its colon since the port has none of those.

    Examples:
        >>> _strip_socket_prefix("tcp4:10.0.0.1:80")
        "10.0.0.1:80"

        >>> _strip_socket_prefix("10.0.0.1:80")
        "10.0.0.1:80"

        >>> _strip_socket_prefix("2001:db8::1")
        "2001:db8::1"
    """
    prefix, sep, rest = text.partition(":")
    if not sep or not prefix or not rest:
        return text
    if not all(c.isalnum() or c == "_" for c in prefix):
        return text
    # Scoped IPv6 literal
    if "%" in text:
        return text
    if not ("." in rest or ":" in rest or rest.startswith("[")):
        return text
    # First hex group of a bare IPv6 literal, not a tag
    if _parse_ipv6(text) is not None:
        return text
    return rest


def _parse_socket_address(text: str) -> Optional[Endpoint]:
    """Parse "a.b.c.d:port", "[v6]:port" or "[v6%scope]:port".

    The numeric scope of a bracketed IPv6 address is accepted and
    discarded. Returns None when text is not a socket address.
    """
    match = _SOCKET_V4.fullmatch(text)
    if match:
        v4 = _parse_ipv4(match["host"])
        port = _parse_port(match["port"])
        if v4 is None or port is None:
            return None
        return Endpoint(V4(v4), port)

    match = _SOCKET_V6.fullmatch(text)
    if match:
        scope = match["scope"]
        if scope is not None and _parse_decimal(scope, _MAX_SCOPE_ID) is None:
            return None
        v6 = _parse_ipv6(match["host"])
        port = _parse_port(match["port"])
        if v6 is None or port is None:
            return None
        return Endpoint(V6(v6), port)

    return None


def _parse_port(digits: str) -> Optional[int]:
    return _parse_decimal(digits, _MAX_PORT)


def _parse_decimal(digits: str, maximum: int) -> Optional[int]:
    """Parse ASCII decimal digits, None when above maximum."""
    significant = digits.lstrip("0") or "0"
    # Length check first so int() never sees an unbounded digit string
    if len(significant) > len(str(maximum)):
        return None
    value = int(significant)
    return value if value <= maximum else None


def _parse_ipv4(text: str) -> Optional[IPv4Address]:
    try:
        return IPv4Address(text)
    except ValueError:
        return None


def _parse_ipv6(text: str) -> Optional[IPv6Address]:
    """Parse a bare IPv6 literal; zones are not accepted here."""
    if "%" in text:
        return None
    try:
        return IPv6Address(text)
    except ValueError:
        return None


def _parse_ip(text: str) -> Optional[IpVersion]:
    v4 = _parse_ipv4(text)
    if v4 is not None:
        return V4(v4)
    v6 = _parse_ipv6(text)
    if v6 is not None:
        return V6(v6)
    return None
