"""A threaded TCP server that echoes client data and logs logins and logouts."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
import time
from datetime import datetime
from pathlib import Path
from types import TracebackType

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 12345
DEFAULT_LOG_FILE = "server_log.txt"
CHUNK_SIZE = 1024

_LOG_LOCK = threading.Lock()
_ACCEPT_POLL_SECONDS = 0.2


def log_time(client: str, action: str, log_path: str | Path = DEFAULT_LOG_FILE) -> None:
    """Append a timestamped line recording that ``client`` performed ``action``."""
    with _LOG_LOCK:
        stamp = time.ctime()
        with Path(log_path).open("a", encoding="utf-8") as handle:
            handle.write(f"{client} {action} at {stamp}\n")


def realtime_message() -> str:
    """The line sent to a client after each echo."""
    return f"Real-time data: {time.time_ns()}\n"


class ChatServer:
    """Accepts TCP clients, one thread each, echoing whatever they send."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        log_path: str | Path = DEFAULT_LOG_FILE,
    ) -> None:
        self.log_path = Path(log_path)
        self.login_times: dict[str, datetime] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._listener = socket.create_server((host, port))
        self._listener.settimeout(_ACCEPT_POLL_SECONDS)

    @property
    def server_address(self) -> tuple[str, int]:
        host, port = self._listener.getsockname()[:2]
        return host, port

    def handle_client(self, conn: socket.socket, address) -> None:
        """Serve one connection until the peer closes it, then log the logout."""
        client = address[0]
        with self._lock:
            self.login_times[client] = datetime.now()
        log_time(client, "logged in", self.log_path)
        try:
            with conn:
                while chunk := conn.recv(CHUNK_SIZE):
                    conn.sendall(chunk)
                    conn.sendall(realtime_message().encode("ascii"))
        except OSError as error:
            print(f"Exception in thread: {error}", file=sys.stderr)
        log_time(client, "logged out", self.log_path)

    def serve_forever(self) -> None:
        """Accept connections until :meth:`shutdown` is called."""
        try:
            while not self._stop.is_set():
                try:
                    conn, address = self._listener.accept()
                except TimeoutError:
                    continue
                conn.settimeout(None)
                print("Client connected.", flush=True)
                threading.Thread(
                    target=self.handle_client, args=(conn, address), daemon=True
                ).start()
        finally:
            self._listener.close()

    def shutdown(self) -> None:
        """Ask :meth:`serve_forever` to stop accepting."""
        self._stop.set()

    def close(self) -> None:
        self._stop.set()
        self._listener.close()

    def __enter__(self) -> ChatServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Start the server and serve until interrupted."""
    parser = argparse.ArgumentParser(description="Echo server that logs client sessions.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE)
    args = parser.parse_args(argv)
    try:
        with ChatServer(args.host, args.port, args.log_file) as server:
            print("Server started, waiting for connections...", flush=True)
            server.serve_forever()
    except OSError as error:
        print(f"Exception: {error}", file=sys.stderr)
    except KeyboardInterrupt:
        pass
    return 0