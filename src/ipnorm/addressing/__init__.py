"""Endpoint parsing for ipnorm.

This module turns loosely formatted endpoint strings into typed values:
- Plain literals: 10.0.0.1, 2001:db8::1, ::ffff:192.168.1.1
- With port: 10.0.0.1:80, [2001:db8::1]:80
- Scoped IPv6: fe80::1%eth0 (zone dropped)
- Decorated: http://10.0.0.1:8080, tcp6:[::1]:22, " 10 . 0 . 0 . 1 "

Examples:
    address, port = parse_endpoint("[::1]:8080")
    str(address)        # "::1"
    address.to_ip()     # IPv6Address('::1')
"""

from .parser import EndpointParseError, parse_endpoint
from .types import V4, V6, Endpoint, IpVersion, from_ip

__all__ = [
    "Endpoint",
    "EndpointParseError",
    "IpVersion",
    "V4",
    "V6",
    "from_ip",
    "parse_endpoint",
]
