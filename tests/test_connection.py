import errno
import socket

import pytest

from helixkit.net.address import ServiceAddress, SocketError
from helixkit.net.connection import Socket, would_block


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


@pytest.fixture
def pair():
    service = ServiceAddress("127.0.0.1", _free_port())
    server = Socket()
    server.bind(service)
    server.listen()
    client = Socket()
    client.connect(service)
    assert server.wait_for_connection(2, 0)
    accepted = server.accept()
    yield server, client, accepted, service
    for item in (accepted, client, server):
        item.close()


def test_would_block():
    assert would_block(errno.EAGAIN)
    assert would_block(errno.EWOULDBLOCK)
    assert not would_block(errno.EINTR)


def test_bind_records_address(pair):
    server, client, _, service = pair
    assert server.connected_address() == service
    assert client.connected_address() == service


def test_accepted_socket_knows_peer(pair):
    _, _, accepted, _ = pair
    assert str(accepted.connected_address().address) == "127.0.0.1"


def test_send_and_receive(pair):
    _, client, accepted, _ = pair
    assert client.send_wait(b"hello") == 5
    assert accepted.receive_wait(16) == b"hello"


def test_receive_no_wait_when_empty(pair):
    _, client, _, _ = pair
    assert client.receive_no_wait(8) == b""


def test_flush_discards_pending_data(pair):
    _, client, accepted, _ = pair
    payload = bytes(range(100))
    accepted.send(payload)
    assert client.wait_for_connection(2, 0)
    received = b""
    total = 0
    while total < len(payload):
        assert client.wait_for_connection(2, 0)
        total += client.flush()
    assert total == len(payload)
    assert client.receive_no_wait(8) == received


def test_receive_wait_times_out(pair):
    _, client, _, _ = pair
    client.set_receive_timeout(0, 50000)
    assert client.receive_wait(4) is None


def test_receive_wait_reports_disconnect(pair):
    _, client, accepted, _ = pair
    accepted.close()
    assert client.receive_wait(4) == b""


def test_wait_for_connection_without_pending():
    service = ServiceAddress("127.0.0.1", _free_port())
    with Socket() as server:
        server.bind(service)
        server.listen()
        assert server.wait_for_connection(0, 10000) is False


def test_connect_to_closed_port_raises():
    service = ServiceAddress("127.0.0.1", _free_port())
    with Socket() as client:
        with pytest.raises(SocketError):
            client.connect(service)


def test_operations_after_close_raise():
    sock = Socket()
    sock.close()
    sock.close()
    with pytest.raises(SocketError) as info:
        sock.listen()
    assert info.value.errno == errno.EBADF


def test_set_send_timeout_allows_sending(pair):
    _, client, accepted, _ = pair
    client.set_send_timeout(1, 0)
    assert client.send_wait(b"abc") == 3
    assert accepted.receive_wait(3) == b"abc"