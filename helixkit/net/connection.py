"""A small wrapper over IPv4 stream sockets."""

from __future__ import annotations

import errno
import select
import socket
import struct
from types import TracebackType

from helixkit.net.address import ServiceAddress, SocketError

_FLUSH_CHUNK = 64


def would_block(error_code: int | None) -> bool:
    """True when the error number means the call would have blocked."""
    return error_code in (errno.EAGAIN, errno.EWOULDBLOCK)


def _timeval(seconds: int, microseconds: int) -> bytes:
    return struct.pack("@ll", seconds, microseconds)


class Socket:
    """An IPv4 TCP socket whose failures raise ``SocketError``."""

    def __init__(self) -> None:
        try:
            self._handle: socket.socket | None = socket.socket(
                socket.AF_INET, socket.SOCK_STREAM
            )
        except OSError as error:
            raise SocketError(error.errno, "Failed to create socket") from error
        self._connected_address = ServiceAddress()

    @classmethod
    def _adopt(cls, handle: socket.socket, address: ServiceAddress) -> Socket:
        result = cls.__new__(cls)
        result._handle = handle
        result._connected_address = address
        return result

    def _socket(self) -> socket.socket:
        if self._handle is None:
            raise SocketError(errno.EBADF, "Socket is closed")
        return self._handle

    def close(self) -> None:
        """Close the socket; closing twice is harmless."""
        if self._handle is not None:
            self._handle.close()
        self._handle = None

    def listen(self) -> None:
        try:
            self._socket().listen(socket.SOMAXCONN)
        except OSError as error:
            raise SocketError(
                error.errno, "Failed to mark socket as listening"
            ) from error

    def bind(self, service_address: ServiceAddress) -> None:
        try:
            self._socket().bind(service_address.socket_address())
        except OSError as error:
            raise SocketError(
                error.errno, f"Failed to bind to {service_address}"
            ) from error
        self._connected_address = service_address

    def accept(self) -> Socket:
        """Block until a connection arrives; return a socket connected to it."""
        try:
            handle, peer = self._socket().accept()
        except OSError as error:
            raise SocketError(error.errno, "Failed to accept connection") from error
        return Socket._adopt(handle, ServiceAddress.from_socket_address(peer))

    def connect(self, service_address: ServiceAddress) -> None:
        try:
            self._socket().connect(service_address.socket_address())
        except OSError as error:
            raise SocketError(
                error.errno, f"Failed to connect to {service_address}"
            ) from error
        self._connected_address = service_address

    def connected_address(self) -> ServiceAddress:
        """The address bound, connected to, or accepted from."""
        return self._connected_address

    def receive(self, count: int, flags: int = 0) -> bytes:
        """Receive up to ``count`` bytes; failures raise OSError."""
        return self._socket().recv(count, flags)

    def flush(self) -> int:
        """Discard everything already received; return the discarded count."""
        discarded = 0
        while True:
            data = self.receive_no_wait(_FLUSH_CHUNK)
            if not data:
                return discarded
            discarded += len(data)

    def receive_no_wait(self, count: int) -> bytes:
        """Receive what is ready, up to ``count`` bytes; empty if nothing is."""
        try:
            return self.receive(count, socket.MSG_DONTWAIT)
        except OSError as error:
            if would_block(error.errno):
                return b""
            raise SocketError(
                error.errno, "Failed to receieve data from socket"
            ) from error

    def receive_wait(self, count: int) -> bytes | None:
        """Block for up to ``count`` bytes; None when the receive timed out.

        Empty bytes mean the remote end disconnected.
        """
        try:
            return self.receive(count, 0)
        except OSError as error:
            if would_block(error.errno):
                return None
            raise SocketError(
                error.errno, "Failed to receieve data from socket"
            ) from error

    def send(self, data: bytes, flags: int = 0) -> int:
        """Send some of ``data``; return the count sent. Failures raise OSError."""
        return self._socket().send(data, flags)

    def send_wait(self, data: bytes) -> int | None:
        """Block to send some of ``data``; None when the send timed out."""
        try:
            return self.send(data, 0)
        except OSError as error:
            if would_block(error.errno):
                return None
            raise SocketError(error.errno, "Failed to send data to socket") from error

    def _set_option(self, option: int, value: bytes) -> None:
        try:
            self._socket().setsockopt(socket.SOL_SOCKET, option, value)
        except OSError as error:
            raise SocketError(error.errno, "Failed to set socket option") from error

    def set_receive_timeout(self, seconds: int, microseconds: int) -> None:
        self._set_option(socket.SO_RCVTIMEO, _timeval(seconds, microseconds))

    def set_send_timeout(self, seconds: int, microseconds: int) -> None:
        self._set_option(socket.SO_SNDTIMEO, _timeval(seconds, microseconds))

    def wait_for_connection(self, seconds: int, microseconds: int) -> bool:
        """True when the socket becomes readable (accept will not block)."""
        timeout = seconds + microseconds / 1_000_000
        try:
            readable, _, _ = select.select([self._socket()], [], [], timeout)
        except InterruptedError:
            return False
        except OSError as error:
            raise SocketError(
                error.errno, "Failed to wait for new connection"
            ) from error
        return bool(readable)

    def __enter__(self) -> Socket:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()