# address.py

import socket
from typing import Any, FrozenSet, Tuple

from loguru import logger

LOOPBACK_ALIASES: FrozenSet[str] = frozenset(
    {"localhost", "127.0.0.1", "127.0.1.1"}
)
MAX_PORT_VALUE: int = 2 ** 31 - 1


class InvalidAddressError(ValueError):
    """Raised when a host-and-port string can't be parsed."""


class UnresolvableHostError(RuntimeError):
    """Raised when the local machine's IP address can't be resolved."""


def get_local_ip_address() -> str:
    """
    Resolves the IP address of the local machine.

    The returned address is expected to be publicly visible, but this is not
    checked: hosts whose name maps to a loopback entry will hand one back.

    Returns:
        str: The local IP address, e.g. "10.0.0.5".

    Raises:
        UnresolvableHostError: If the local host name can't be resolved.
    """
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError as exc:
        logger.error("unable to resolve local host: {}", exc)
        raise UnresolvableHostError(
            "unable to resolve local host address"
        ) from exc


def _convert_if_localhost(host: str) -> str:
    if host not in LOOPBACK_ALIASES:
        return host
    ip = get_local_ip_address()
    logger.debug("replaced loopback alias {} with {}", host, ip)
    return ip


def _parse_port(text: str) -> int:
    port = int(text)
    if port > MAX_PORT_VALUE:
        raise ValueError(f"port value out of range: {text}")
    return port


class Address:
    """
    Represents a network endpoint: a host and a port.

    Addresses are immutable. Loopback aliases (see LOOPBACK_ALIASES) are
    replaced by the local machine's IP address when the address is built, so
    an address handed to another node points back at this one.

    Attributes:
        host (str): The host name or IP address.
        port (int): The network port number. Not range checked.

    Provides equality, hashing and "host:port" string rendering.
    """
    __slots__ = ('_host', '_port')


    def __init__(self, host: str, port: int) -> None:
        object.__setattr__(self, '_host', _convert_if_localhost(host))
        object.__setattr__(self, '_port', port)



    @classmethod
    def create(cls, host: str, port: int) -> "Address":
        """
        Creates an address from a host and a port.

        Args:
            host (str): Host name or IP address; loopback aliases are resolved.
            port (int): Port number.

        Returns:
            Address: The new address.
        """
        return cls(host, port)



    @classmethod
    def from_string(cls, text: str) -> "Address":
        """
        Parses a "host:port" string.

        Everything before the last colon is the host, and everything after
        it must be decimal digits. Hosts may contain colons themselves, so
        unbracketed IPv6 literals are split at their last group.

        Args:
            text (str): String of the form "host:port".

        Returns:
            Address: The parsed address.

        Raises:
            InvalidAddressError: If the string is missing, malformed, has an
                empty host, or has a port too large to parse.
        """
        if not text or not isinstance(text, str):
            raise InvalidAddressError("host-and-port string must be present")

        host, sep, port_text = text.rpartition(':')
        if (not sep or not port_text
                or not (port_text.isascii() and port_text.isdigit())):
            raise InvalidAddressError(
                f"can't parse host-and-port string from: {text}"
            )

        if not host:
            raise InvalidAddressError(f"can't parse host from: {text}")

        try:
            port = _parse_port(port_text)
        except ValueError as exc:
            raise InvalidAddressError(
                f"can't parse port from: {text}"
            ) from exc

        return cls(host, port)



    @classmethod
    def _restore(cls, host: str, port: int) -> "Address":
        # host is already normalized
        address = cls.__new__(cls)
        object.__setattr__(address, '_host', host)
        object.__setattr__(address, '_port', port)
        return address



    @property
    def host(self) -> str:
        return self._host



    @property
    def port(self) -> int:
        return self._port



    def with_port(self, port: int) -> "Address":
        """Returns a new address with the same host and the given port."""
        return Address._restore(self._host, port)



    def add_port_offset(self, offset: int) -> "Address":
        """Returns a new address with the same host and port + offset."""
        return Address._restore(self._host, self._port + offset)



    def as_tuple(self) -> Tuple[str, int]:
        return (self._host, self._port)



    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")



    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")



    def __reduce__(self) -> Tuple[Any, Tuple[str, int]]:
        return (Address._restore, (self._host, self._port))



    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Address):
            return False
        return self._host == other._host and self._port == other._port



    def __hash__(self) -> int:
        return hash((self._host, self._port))



    def __str__(self) -> str:
        return f"{self._host}:{self._port}"



    def __repr__(self) -> str:
        return f"Address(host={self._host!r}, port={self._port})"


NULL_ADDRESS: Address = Address("nullhost", 0)
