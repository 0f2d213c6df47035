"""A UDP echo service and a client that sends one line to it."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Sequence

from .chat import BUFFER_SIZE, DEFAULT_PORT, decode_message, encode_message


def serve_echo(
    host: str = "",
    port: int = DEFAULT_PORT,
    max_datagrams: int | None = None,
) -> list[str]:
    """Send every datagram back to its sender as a full NUL-padded frame.

    Runs forever unless *max_datagrams* is given; returns the messages received.
    """
    received: list[str] = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        print(f"Server is listening on port {sock.getsockname()[1]}...", flush=True)
        while max_datagrams is None or len(received) < max_datagrams:
            data, client = sock.recvfrom(BUFFER_SIZE)
            payload = data[: BUFFER_SIZE - 1].split(b"\0", 1)[0]
            message = decode_message(payload)
            print(f"Received: {message}", flush=True)
            sock.sendto(payload.ljust(BUFFER_SIZE, b"\0"), client)
            received.append(message)
    return received


def echo_request(text: str, host: str = "127.0.0.1", port: int = DEFAULT_PORT) -> str:
    """Send *text* up to its first newline and return what the server echoes."""
    line = text.split("\n", 1)[0]
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.sendto(encode_message(line), (host, port))
        data, _ = sock.recvfrom(BUFFER_SIZE)
    return decode_message(data)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="UDP echo server and client.")
    parser.add_argument("mode", choices=("serve", "send"))
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        if args.mode == "serve":
            serve_echo("" if args.host is None else args.host, args.port)
        else:
            sys.stdout.write("Enter a string: ")
            sys.stdout.flush()
            line = sys.stdin.readline()
            host = "127.0.0.1" if args.host is None else args.host
            print(f"From server: {echo_request(line, host, args.port)}")
    except KeyboardInterrupt:
        return 0
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())