"""Address types for endpoint parsing."""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import NamedTuple, Optional, Union


@dataclass(frozen=True)
class V4:
    """IPv4 address variant.

    Examples:
        V4(IPv4Address("10.0.0.1")) → "10.0.0.1"
    """

    address: IPv4Address
    """Validated IPv4 address."""

    version = 4

    def to_ip(self) -> IPv4Address:
        return self.address

    def __str__(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class V6:
    """IPv6 address variant.

    Never carries a zone; a scoped address has its zone dropped on
    construction.

    Examples:
        V6(IPv6Address("2001:db8::1")) → "2001:db8::1"
        V6(IPv6Address("fe80::1%eth0")) → "fe80::1"
    """

    address: IPv6Address
    """Validated IPv6 address, without zone."""

    version = 6

    def __post_init__(self):
        if self.address.scope_id is not None:
            object.__setattr__(self, "address", IPv6Address(self.address.packed))

    def to_ip(self) -> IPv6Address:
        return self.address

    def __str__(self) -> str:
        return str(self.address)


IpVersion = Union[V4, V6]


def from_ip(addr: Union[IPv4Address, IPv6Address]) -> IpVersion:
    """Wrap a native address value in its variant.

    A zone on a scoped IPv6Address is dropped.

    Raises:
        TypeError: If addr is not an IPv4Address or IPv6Address
    """
    if isinstance(addr, IPv4Address):
        return V4(addr)
    if isinstance(addr, IPv6Address):
        return V6(addr)
    raise TypeError(f"Expected IPv4Address or IPv6Address, got {type(addr).__name__}")


class Endpoint(NamedTuple):
    """Parsed endpoint: an address and an optional port.

    Unpacks as a pair:
        address, port = parse_endpoint("10.0.0.1:80")
    """

    address: IpVersion
    """IPv4 or IPv6 variant."""

    port: Optional[int] = None
    """Port (0-65535), or None when the input had no port."""

    def __str__(self) -> str:
        """Render in a form that parses back to an equal Endpoint."""
        if self.port is None:
            return str(self.address)
        if isinstance(self.address, V6):
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"
