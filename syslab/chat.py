"""Interactive chat over TCP or UDP using fixed-size, NUL-padded frames."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Iterable, Sequence, TextIO

BUFFER_SIZE = 2000
DEFAULT_PORT = 8888


def encode_message(text: str) -> bytes:
    """Encode *text* as one NUL-padded frame of BUFFER_SIZE bytes."""
    data = text.encode("utf-8")
    if b"\0" in data:
        raise ValueError("message must not contain a NUL character")
    if len(data) >= BUFFER_SIZE:
        raise ValueError(f"message too long: {len(data)} bytes, limit is {BUFFER_SIZE - 1}")
    return data.ljust(BUFFER_SIZE, b"\0")


def decode_message(data: bytes) -> str:
    """Return the text of a frame, up to its first NUL byte."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _emit(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _recv_frame(conn: socket.socket) -> bytes:
    """Read one whole frame; a shorter result means the peer closed."""
    data = bytearray()
    while len(data) < BUFFER_SIZE:
        chunk = conn.recv(BUFFER_SIZE - len(data))
        if not chunk:
            break
        data += chunk
    return bytes(data)


def serve_tcp_chat(host: str, port: int, lines: Iterable[str], out: TextIO) -> list[str]:
    """Accept one client; answer each message with the next input word. Returns messages."""
    words = (word for line in lines for word in line.split())
    received: list[str] = []
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        _emit(out, " \n Bind done! ")
        listener.listen(3)
        _emit(out, "\n waiting for incoming connection.....")
        conn, _ = listener.accept()
    with conn:
        _emit(out, "\n Connection accepted")
        while frame := _recv_frame(conn):
            message = decode_message(frame)
            received.append(message)
            _emit(out, f"\n From client:  {message}\n \n To client: ")
            word = next(words, None)
            if word is None:
                break
            conn.sendall(encode_message(word))
    return received


def run_tcp_chat_client(host: str, port: int, lines: Iterable[str], out: TextIO) -> list[str]:
    """Send each input word and collect the server's replies."""
    words = (word for line in lines for word in line.split())
    replies: list[str] = []
    with socket.create_connection((host, port)) as conn:
        while True:
            _emit(out, "\n To server: ")
            word = next(words, None)
            if word is None:
                break
            conn.sendall(encode_message(word))
            frame = _recv_frame(conn)
            if not frame:
                break
            replies.append(decode_message(frame))
            _emit(out, f"\n From server: {replies[-1]}\n")
    return replies


def serve_udp_chat(host: str, port: int, lines: Iterable[str], out: TextIO) -> list[str]:
    """Answer each datagram with the next input line, newline kept. Returns messages."""
    answers = iter(lines)
    received: list[str] = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        _emit(out, f"\nUDP Server listening on port {sock.getsockname()[1]}...\n")
        while True:
            data, client = sock.recvfrom(BUFFER_SIZE)
            received.append(decode_message(data))
            _emit(out, f"\nFrom client: {received[-1]}\n\nTo client: ")
            line = next(answers, None)
            if line is None:
                break
            sock.sendto(encode_message(line), client)
    return received


def run_udp_chat_client(host: str, port: int, lines: Iterable[str], out: TextIO) -> list[str]:
    """Send each input line as a datagram and collect the replies."""
    replies: list[str] = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        for line in lines:
            _emit(out, "\nTo server: ")
            sock.sendto(encode_message(line), (host, port))
            data, _ = sock.recvfrom(BUFFER_SIZE)
            replies.append(decode_message(data))
            _emit(out, f"\nFrom server: {replies[-1]}\n")
        _emit(out, "\nTo server: ")
    return replies


_RUNNERS = {
    "tcp-server": serve_tcp_chat,
    "tcp-client": run_tcp_chat_client,
    "udp-server": serve_udp_chat,
    "udp-client": run_udp_chat_client,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Chat over TCP or UDP.")
    parser.add_argument("mode", choices=tuple(_RUNNERS))
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    default_host = "" if args.mode.endswith("server") else "127.0.0.1"
    host = default_host if args.host is None else args.host
    try:
        _RUNNERS[args.mode](host, args.port, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        return 0
    except (ValueError, OSError) as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())