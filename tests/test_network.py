import socket
import struct
import threading

import pytest

from algobox.network import (
    digit_sum,
    main,
    serve_tcp_once,
    serve_udp_once,
    tcp_request,
    udp_request,
)


@pytest.fixture(autouse=True)
def _socket_timeout():
    previous = socket.getdefaulttimeout()
    socket.setdefaulttimeout(5)
    yield
    socket.setdefaulttimeout(previous)


def _in_thread(target, *args):
    box = {}

    def work():
        try:
            box["result"] = target(*args)
        except BaseException as exc:  # noqa: BLE001
            box["error"] = exc

    thread = threading.Thread(target=work, daemon=True)
    thread.start()
    return thread, box


@pytest.fixture
def tcp_listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(4)
    yield sock
    sock.close()


@pytest.fixture
def udp_bound():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    yield sock
    sock.close()


def test_digit_sum_of_zero_and_negative_is_zero():
    assert digit_sum(0) == 0
    assert digit_sum(-42) == 0


def test_digit_sum_single_digit_is_itself():
    assert digit_sum(7) == 7


def test_digit_sum_of_power_of_ten_is_one():
    assert [digit_sum(10**k) for k in range(6)] == [1] * 6


def test_digit_sum_values():
    assert digit_sum(4321) == 10
    assert digit_sum(9999) == 36


@pytest.mark.parametrize("n", [12, 305, 98760, 1234567])
def test_digit_sum_ignores_digit_order(n):
    assert digit_sum(n) == digit_sum(int(str(n)[::-1]))


def test_tcp_round_trip(tcp_listener):
    port = tcp_listener.getsockname()[1]
    thread, box = _in_thread(serve_tcp_once, tcp_listener, str.upper)
    reply = tcp_request("127.0.0.1", port, "hello")
    thread.join(5)
    assert reply == "HELLO"
    assert box.get("result") == "hello"


def test_tcp_server_passes_message_to_responder(tcp_listener):
    port = tcp_listener.getsockname()[1]
    seen = []

    def respond(message):
        seen.append(message)
        return "ack"

    thread, box = _in_thread(serve_tcp_once, tcp_listener, respond)
    reply = tcp_request("127.0.0.1", port, "request body")
    thread.join(5)
    assert reply == "ack"
    assert seen == ["request body"]


def test_udp_round_trip(udp_bound):
    port = udp_bound.getsockname()[1]
    thread, box = _in_thread(serve_udp_once, udp_bound)
    answer = udp_request("127.0.0.1", port, 12345)
    thread.join(5)
    assert answer == digit_sum(12345)
    assert box.get("result") == (12345, digit_sum(12345))


def test_udp_wire_format_is_32_bit_little_endian(udp_bound):
    port = udp_bound.getsockname()[1]
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as client:
        client.sendto(struct.pack("<i", 7), ("127.0.0.1", port))
        result = serve_udp_once(udp_bound)
        data, _ = client.recvfrom(16)
    assert result == (7, 7)
    assert data == struct.pack("<i", 7)


def test_udp_server_rejects_short_datagram(udp_bound):
    port = udp_bound.getsockname()[1]
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as client:
        client.sendto(b"\x01\x02", ("127.0.0.1", port))
        with pytest.raises(ValueError):
            serve_udp_once(udp_bound)


def test_udp_request_rejects_out_of_range_number():
    with pytest.raises(ValueError):
        udp_request("127.0.0.1", 9, 2**40)


def test_main_udp_client_prints_answer(udp_bound, capsys):
    port = udp_bound.getsockname()[1]
    thread, box = _in_thread(serve_udp_once, udp_bound)
    code = main(["udp-client", "--port", str(port), "505"])
    thread.join(5)
    out = capsys.readouterr().out
    assert code == 0
    assert f"Server's Number: {digit_sum(505)}" in out


def test_main_tcp_client_prints_reply(tcp_listener, capsys):
    port = tcp_listener.getsockname()[1]
    thread, box = _in_thread(serve_tcp_once, tcp_listener, lambda message: message[::-1])
    code = main(["tcp-client", "--port", str(port), "abc"])
    thread.join(5)
    out = capsys.readouterr().out
    assert code == 0
    assert "Server's Message: cba" in out


def test_main_tcp_client_reports_refused_connection(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    code = main(["tcp-client", "--port", str(port), "anything"])
    assert code == 1
    assert "error" in capsys.readouterr().err