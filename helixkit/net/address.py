"""IPv4 addresses, service addresses and socket errors."""

from __future__ import annotations

import errno
import operator

from helixkit.strings import all_of_digits, split


class SocketError(OSError):
    """A socket operation failed."""


class SocketDisconnected(RuntimeError):
    """The remote end closed the connection."""


def _octet(text: str) -> int:
    if not text or not all_of_digits(text):
        raise ValueError(f"invalid octet: {text!r}")
    value = int(text)
    if value > 255:
        raise ValueError(f"octet out of range: {text!r}")
    return value


class Address:
    """An IPv4 address held as four octets."""

    __slots__ = ("values",)

    def __init__(self, value: str | bytes | Address | None = None) -> None:
        if value is None:
            self.values: tuple[int, int, int, int] = (0, 0, 0, 0)
        elif isinstance(value, Address):
            self.values = value.values
        elif isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            if len(raw) != 4:
                raise ValueError("Expected 4 bytes")
            self.values = tuple(raw)  # type: ignore[assignment]
        elif isinstance(value, str):
            parts = split(value, ".")
            if len(parts) != 4:
                raise SocketError(errno.EFAULT, "Expected 4 octets")
            self.values = tuple(_octet(part) for part in parts)  # type: ignore[assignment]
        else:
            raise TypeError(f"cannot make an address from {type(value).__name__}")

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.values)

    def packed(self) -> bytes:
        """The four octets in network order."""
        return bytes(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.values == other.values

    def __hash__(self) -> int:
        return hash(self.values)

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"


class ServiceAddress:
    """An IPv4 address together with a port."""

    __slots__ = ("address", "port")

    def __init__(self, address: Address | str | bytes | None = None, port: int = 0) -> None:
        port = operator.index(port)
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")
        self.address = Address(address)
        self.port = port

    @classmethod
    def from_socket_address(cls, socket_address: tuple) -> ServiceAddress:
        """Build from a ``(host, port)`` pair as used by the socket module."""
        host, port = socket_address[0], socket_address[1]
        return cls(Address(host), port)

    def socket_address(self) -> tuple[str, int]:
        """The ``(host, port)`` pair expected by the socket module."""
        return str(self.address), self.port

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceAddress):
            return NotImplemented
        return self.address == other.address and self.port == other.port

    def __hash__(self) -> int:
        return hash((self.address, self.port))

    def __repr__(self) -> str:
        return f"ServiceAddress({str(self.address)!r}, {self.port})"