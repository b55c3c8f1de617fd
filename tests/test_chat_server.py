import socket
import threading
import time

import pytest

from deskkit.chat_server import ChatServer, log_time, realtime_message

PREFIX = b"Real-time data: "


def _parse_stamp(line: str, client: str, action: str) -> time.struct_time:
    head = f"{client} {action} at "
    assert line.startswith(head)
    return time.strptime(line[len(head):], "%a %b %d %H:%M:%S %Y")


def _wait_for(path, text, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if path.exists() and text in path.read_text(encoding="utf-8"):
            return True
        time.sleep(0.02)
    return False


def test_log_time_appends_lines(tmp_path):
    log = tmp_path / "server_log.txt"
    log_time("10.0.0.1", "logged in", log)
    log_time("10.0.0.1", "logged out", log)
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    _parse_stamp(lines[0], "10.0.0.1", "logged in")
    stamp = _parse_stamp(lines[1], "10.0.0.1", "logged out")
    assert stamp.tm_year == time.localtime().tm_year


def test_realtime_message_carries_current_time():
    before = time.time_ns()
    message = realtime_message()
    after = time.time_ns()
    assert message.startswith("Real-time data: ")
    assert message.endswith("\n")
    value = int(message[len("Real-time data: "):-1])
    assert before <= value <= after


def test_handle_client_echoes_and_logs(tmp_path):
    log = tmp_path / "log.txt"
    server_side, client_side = socket.socketpair()
    with ChatServer("127.0.0.1", 0, log) as server:
        worker = threading.Thread(
            target=server.handle_client, args=(server_side, ("127.0.0.1", 5555))
        )
        started = time.time_ns()
        worker.start()
        with client_side, client_side.makefile("rb") as reader:
            client_side.sendall(b"hello\n")
            assert reader.readline() == b"hello\n"
            realtime = reader.readline()
            assert realtime.startswith(PREFIX)
            assert int(realtime[len(PREFIX):].strip()) >= started
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert "127.0.0.1" in server.login_times
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    _parse_stamp(lines[0], "127.0.0.1", "logged in")
    _parse_stamp(lines[1], "127.0.0.1", "logged out")


def test_handle_client_echoes_each_message(tmp_path):
    log = tmp_path / "log.txt"
    server_side, client_side = socket.socketpair()
    with ChatServer("127.0.0.1", 0, log) as server:
        worker = threading.Thread(
            target=server.handle_client, args=(server_side, ("192.0.2.7", 1))
        )
        worker.start()
        echoes = []
        stamps = []
        with client_side, client_side.makefile("rb") as reader:
            for message in (b"first\n", b"second\n"):
                client_side.sendall(message)
                echoes.append(reader.readline())
                stamps.append(reader.readline())
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert "192.0.2.7" in server.login_times
    assert echoes == [b"first\n", b"second\n"]
    assert all(stamp.startswith(PREFIX) for stamp in stamps)
    values = [int(stamp[len(PREFIX):].strip()) for stamp in stamps]
    assert values[0] <= values[1]
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    _parse_stamp(lines[0], "192.0.2.7", "logged in")
    _parse_stamp(lines[1], "192.0.2.7", "logged out")


def test_serve_forever_accepts_clients(tmp_path):
    log = tmp_path / "log.txt"
    server = ChatServer("127.0.0.1", 0, log)
    host, port = server.server_address
    runner = threading.Thread(target=server.serve_forever)
    runner.start()
    try:
        with socket.create_connection((host, port), timeout=5) as conn:
            with conn.makefile("rb") as reader:
                conn.sendall(b"ping\n")
                assert reader.readline() == b"ping\n"
                assert reader.readline().startswith(PREFIX)
        assert _wait_for(log, "logged out")
    finally:
        server.shutdown()
        runner.join(timeout=5)
    assert not runner.is_alive()
    lines = log.read_text(encoding="utf-8").splitlines()
    _parse_stamp(lines[0], "127.0.0.1", "logged in")


def test_port_in_use_raises(tmp_path):
    with ChatServer("127.0.0.1", 0, tmp_path / "log.txt") as first:
        _, port = first.server_address
        with pytest.raises(OSError):
            ChatServer("127.0.0.1", port, tmp_path / "other.txt")