"""A line-based TCP client that prints whatever the server sends back."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Iterable, TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 12345
LOGOUT = "logout"


def receive_lines(sock: socket.socket, running: threading.Event, output: TextIO) -> None:
    """Print each line from ``sock`` to ``output`` while ``running`` is set."""
    try:
        with sock.makefile("rb") as reader:
            while running.is_set():
                raw = reader.readline()
                if not raw:
                    raise ConnectionError("connection closed by server")
                line = raw.decode("utf-8", errors="replace").removesuffix("\n")
                output.write(f"Received: {line}\n")
                output.flush()
    except (OSError, ValueError) as error:
        if running.is_set():
            print(f"Exception: {error}", file=sys.stderr)


def _send_line(sock: socket.socket, line: str) -> None:
    sock.sendall(f"{line}\n".encode("utf-8"))


def run_client(host: str, port: int, input_stream: Iterable[str], output: TextIO) -> None:
    """Send each input line to the server until ``logout`` or end of input."""
    with socket.create_connection((host, port)) as sock:
        output.write("Connected to server.\n")
        output.flush()
        running = threading.Event()
        running.set()
        receiver = threading.Thread(
            target=receive_lines, args=(sock, running, output), daemon=True
        )
        receiver.start()
        try:
            for raw in input_stream:
                line = raw.removesuffix("\n")
                if line == LOGOUT:
                    running.clear()
                    _send_line(sock, line)
                    break
                _send_line(sock, line)
        finally:
            running.clear()
            try:
                sock.shutdown(socket.SHUT_WR)
            except OSError:
                pass
            receiver.join()


def main(argv: list[str] | None = None) -> int:
    """Connect to the server and relay standard input to it."""
    parser = argparse.ArgumentParser(description="Line-based chat client.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        run_client(args.host, args.port, sys.stdin, sys.stdout)
    except OSError as error:
        print(f"Exception: {error}", file=sys.stderr)
    return 0