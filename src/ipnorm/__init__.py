"""ipnorm - normalize loosely formatted IP endpoints."""

from .addressing import (
    V4,
    V6,
    Endpoint,
    EndpointParseError,
    IpVersion,
    from_ip,
    parse_endpoint,
)

__version__ = "0.1.0"

__all__ = [
    "Endpoint",
    "EndpointParseError",
    "IpVersion",
    "V4",
    "V6",
    "from_ip",
    "parse_endpoint",
]
