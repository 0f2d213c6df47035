"""A TCP daytime service: the server sends the local date and time, then closes."""

from __future__ import annotations

import argparse
import socket
import sys
from datetime import datetime
from typing import Sequence

from .chat import DEFAULT_PORT, decode_message

DAYTIME_FORMAT = "%Y-%m-%d %H:%M:%S"
FRAME_SIZE = 100


def format_daytime(moment: datetime | None = None) -> str:
    """Format *moment* (default: the current local time) as the service sends it."""
    if moment is None:
        moment = datetime.now()
    return moment.strftime(DAYTIME_FORMAT)


def serve_daytime(
    host: str = "127.0.0.1",
    port: int = DEFAULT_PORT,
    max_connections: int | None = None,
) -> int:
    """Answer each connection with the current time in a NUL-padded frame.

    Runs forever unless *max_connections* is given; returns the number served.
    """
    served = 0
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(1)
        print(
            f"Daytime server is listening on port {listener.getsockname()[1]}...",
            flush=True,
        )
        while max_connections is None or served < max_connections:
            conn, _ = listener.accept()
            with conn:
                frame = format_daytime().encode("ascii").ljust(FRAME_SIZE, b"\0")
                conn.sendall(frame)
            served += 1
    return served


def fetch_daytime(host: str = "127.0.0.1", port: int = DEFAULT_PORT) -> str:
    """Connect to a daytime server and return the text it sends."""
    data = bytearray()
    with socket.create_connection((host, port)) as conn:
        while len(data) < FRAME_SIZE:
            chunk = conn.recv(FRAME_SIZE - len(data))
            if not chunk:
                break
            data += chunk
    return decode_message(bytes(data))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve or query the time of day over TCP.")
    parser.add_argument("mode", choices=("serve", "fetch"))
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        if args.mode == "serve":
            serve_daytime(args.host, args.port)
        else:
            print(f"Server date and time: {fetch_daytime(args.host, args.port)}")
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())