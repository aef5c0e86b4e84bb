"""A connected socket that reads and writes fixed-layout binary values."""

from __future__ import annotations

import errno
import struct
from typing import Any

from helixkit.circular_buffer import CircularBuffer
from helixkit.net.address import ServiceAddress, SocketDisconnected, SocketError
from helixkit.net.connection import Socket


def _timed_out() -> SocketError:
    return SocketError(errno.ETIMEDOUT, "Socket timed out")


class Client(Socket):
    """Connects on creation and buffers received bytes to decode values."""

    def __init__(self, service_address: ServiceAddress, buffer_size: int) -> None:
        super().__init__()
        self.buffer_size = buffer_size
        self._read_buffer = CircularBuffer(buffer_size)
        try:
            self.connect(service_address)
        except SocketError:
            self.close()
            raise

    def write_value(self, fmt: str, value: Any) -> None:
        """Pack ``value`` (a tuple for several items) with ``fmt`` and send it."""
        layout = struct.Struct(fmt)
        item_count = len(layout.unpack(bytes(layout.size)))
        packed = layout.pack(*value) if item_count > 1 else layout.pack(value)
        self.send(packed, 0)

    def _layout(self, fmt: str) -> struct.Struct:
        layout = struct.Struct(fmt)
        if layout.size > self.buffer_size:
            raise ValueError("Increase the buffer size to receive larger objects.")
        return layout

    @staticmethod
    def _unpack(layout: struct.Struct, data: list[int]) -> Any:
        values = layout.unpack(bytes(data))
        return values[0] if len(values) == 1 else values

    def read_value(self, fmt: str) -> Any:
        """Wait for a whole value of layout ``fmt``, consume and return it."""
        layout = self._layout(fmt)
        self._fill_read_buffer(layout.size)
        return self._unpack(layout, self._read_buffer.read(layout.size))

    def peek_value(self, fmt: str) -> Any:
        """Wait for a whole value of layout ``fmt`` and return it unconsumed."""
        layout = self._layout(fmt)
        self._fill_read_buffer(layout.size)
        return self._unpack(layout, self._read_buffer.peek(layout.size))

    def read_bytes(self, byte_count: int) -> bytes:
        """Receive exactly ``byte_count`` bytes straight from the socket."""
        received = bytearray()
        while len(received) < byte_count:
            data = self.receive_wait(byte_count - len(received))
            if data is None:
                raise _timed_out()
            if not data:
                raise SocketDisconnected("Remote disconnected")
            received += data
        return bytes(received)

    def write_bytes(self, data: bytes) -> None:
        """Send all of ``data``."""
        view = memoryview(data)
        sent = 0
        while sent < len(view):
            increment = self.send_wait(view[sent:])
            if increment is None:
                raise _timed_out()
            sent += increment

    def format_buffer(self) -> str:
        """The buffered, unread bytes as text."""
        return self._read_buffer.format_elements()

    def discard_buffer(self) -> None:
        """Drop every buffered byte."""
        self._read_buffer.reset()

    def _fill_read_buffer(self, fill_count: int) -> None:
        while len(self._read_buffer) < fill_count:
            self._drain_socket(fill_count - len(self._read_buffer))

    def _drain_socket(self, byte_count: int) -> None:
        writable = self._read_buffer.writable_size()
        if writable == 0:
            raise SocketError(
                errno.ENOBUFS, "Cannot drain socket when read buffer is full."
            )
        data = self.receive_wait(min(writable, byte_count))
        if data is None:
            raise _timed_out()
        if not data:
            raise SocketDisconnected("Remote disconnected")
        self._read_buffer.write(data)