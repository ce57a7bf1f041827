"""A tiny TCP message exchange and a UDP digit-sum service."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from collections.abc import Callable

BUFFER_SIZE = 1024
DEFAULT_PORT = 8080
BACKLOG = 4

# Numbers travel as one 32-bit signed integer, little-endian.
_INT = struct.Struct("<i")


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of *n*; zero or negative gives 0."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def _pack(number: int) -> bytes:
    try:
        return _INT.pack(number)
    except struct.error as exc:
        raise ValueError(f"{number} does not fit in a 32-bit signed integer") from exc


def _unpack(data: bytes) -> int:
    if len(data) != _INT.size:
        raise ValueError(f"expected {_INT.size} bytes, got {len(data)}")
    (number,) = _INT.unpack(data)
    return number


def tcp_request(host: str, port: int, message: str) -> str:
    """Send *message* to a TCP server and return its reply (up to 1024 bytes)."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(message.encode())
        data = sock.recv(BUFFER_SIZE)
    return data.decode(errors="replace")


def serve_tcp_once(sock: socket.socket, respond: Callable[[str], str]) -> str:
    """Accept one client on the listening *sock*, answer it with *respond*.

    Return the message the client sent.
    """
    connection, _ = sock.accept()
    with connection:
        message = connection.recv(BUFFER_SIZE).decode(errors="replace")
        reply = respond(message)
        connection.sendall(reply.encode())
    return message


def udp_request(host: str, port: int, number: int) -> int:
    """Send *number* to a UDP server and return the number it sends back."""
    payload = _pack(number)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.sendto(payload, (host, port))
        data, _ = sock.recvfrom(_INT.size)
    return _unpack(data)


def serve_udp_once(sock: socket.socket) -> tuple[int, int]:
    """Receive one number on the bound *sock* and reply with its digit sum.

    Return the number received and the digit sum sent.
    """
    data, address = sock.recvfrom(_INT.size)
    number = _unpack(data)
    result = digit_sum(number)
    sock.sendto(_INT.pack(result), address)
    return number, result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algobox-net", description="TCP and UDP exchanges.")
    commands = parser.add_subparsers(dest="command", required=True)

    tcp_client = commands.add_parser("tcp-client", help="send one message over TCP")
    tcp_client.add_argument("message", nargs="?", help="message to send")

    tcp_server = commands.add_parser("tcp-server", help="answer one TCP client")
    tcp_server.add_argument("--reply", default=None, help="response to send")

    udp_client = commands.add_parser("udp-client", help="send one number over UDP")
    udp_client.add_argument("number", nargs="?", type=int, help="number to send")

    commands.add_parser("udp-server", help="answer one UDP client with a digit sum")

    for sub in (tcp_client, tcp_server, udp_client):
        sub.add_argument("--port", type=int, default=DEFAULT_PORT)
    for sub in (tcp_client, udp_client):
        sub.add_argument("--host", default="127.0.0.1")
    for sub in commands.choices.values():
        if sub.prog.endswith("server"):
            sub.add_argument("--bind", default="", help="address to listen on")
    commands.choices["udp-server"].add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser


def _run_tcp_server(bind: str, port: int, reply: str | None) -> None:
    def respond(message: str) -> str:
        print(f"Client's Message: {message}")
        if reply is not None:
            return reply
        return input("Enter a response message:\n")

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((bind, port))
        sock.listen(BACKLOG)
        serve_tcp_once(sock, respond)


def _run_udp_server(bind: str, port: int) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((bind, port))
        number, _ = serve_udp_once(sock)
        print(f"Client's Number: {number}")
        print("I've sent the number.")


def main(argv: list[str] | None = None) -> int:
    """Run one client or server exchange chosen on the command line."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "tcp-client":
            message = args.message
            if message is None:
                message = input("Enter a request message:\n")
            reply = tcp_request(args.host, args.port, message)
            print(f"Server's Message: {reply}")
        elif args.command == "tcp-server":
            _run_tcp_server(args.bind, args.port, args.reply)
        elif args.command == "udp-client":
            number = args.number
            if number is None:
                number = int(input("Enter a number:\n"))
            answer = udp_request(args.host, args.port, number)
            print("I've sent the number.")
            print(f"Server's Number: {answer}")
        else:
            _run_udp_server(args.bind, args.port)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0