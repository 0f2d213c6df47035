import socket
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from syslab.daytime import (
    DAYTIME_FORMAT,
    FRAME_SIZE,
    fetch_daytime,
    format_daytime,
    serve_daytime,
)

HOST = "127.0.0.1"


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind((HOST, 0))
        return probe.getsockname()[1]


def _connect_with_retry(port):
    deadline = time.monotonic() + 5
    while True:
        try:
            return socket.create_connection((HOST, port), timeout=5)
        except ConnectionRefusedError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.02)


def _recv_all(conn):
    data = b""
    while True:
        chunk = conn.recv(4096)
        if not chunk:
            return data
        data += chunk


def test_format_daytime_of_fixed_moment():
    assert format_daytime(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"


def test_format_daytime_defaults_to_now():
    before = datetime.now().replace(microsecond=0)
    parsed = datetime.strptime(format_daytime(), DAYTIME_FORMAT)
    after = datetime.now()
    assert before <= parsed <= after


def test_fetch_daytime_reads_text_up_to_nul():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind((HOST, 0))
        listener.listen(1)
        listener.settimeout(5)
        port = listener.getsockname()[1]

        def answer():
            conn, _ = listener.accept()
            with conn:
                conn.sendall(b"2024-01-02 03:04:05".ljust(FRAME_SIZE, b"\0"))

        worker = threading.Thread(target=answer)
        worker.start()
        text = fetch_daytime(HOST, port)
        worker.join(5)
    assert text == "2024-01-02 03:04:05"


def test_server_sends_padded_frame_and_counts_connections():
    port = _free_port()
    with ThreadPoolExecutor(1) as pool:
        future = pool.submit(serve_daytime, HOST, port, 2)
        with _connect_with_retry(port) as conn:
            frame = _recv_all(conn)
        fetched = fetch_daytime(HOST, port)
        served = future.result(timeout=5)
    assert len(frame) == FRAME_SIZE
    text = frame.split(b"\0", 1)[0].decode("ascii")
    first = datetime.strptime(text, DAYTIME_FORMAT)
    second = datetime.strptime(fetched, DAYTIME_FORMAT)
    assert abs((datetime.now() - first).total_seconds()) < 60
    assert first <= second
    assert served == 2