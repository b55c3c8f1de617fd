import io
import socket
import threading

import pytest

from deskkit.chat_client import receive_lines, run_client


def _running(value=True):
    event = threading.Event()
    if value:
        event.set()
    return event


def test_receive_lines_prints_each_line(capsys):
    ours, theirs = socket.socketpair()
    theirs.sendall(b"one\ntwo\n")
    theirs.close()
    output = io.StringIO()
    with ours:
        receive_lines(ours, _running(), output)
    assert output.getvalue() == "Received: one\nReceived: two\n"
    assert "Exception" in capsys.readouterr().err


def test_receive_lines_quiet_when_stopped(capsys):
    ours, theirs = socket.socketpair()
    theirs.sendall(b"ignored\n")
    theirs.close()
    output = io.StringIO()
    with ours:
        receive_lines(ours, _running(False), output)
    assert output.getvalue() == ""
    assert capsys.readouterr().err == ""


class _RecordingServer:
    def __init__(self):
        self.listener = socket.create_server(("127.0.0.1", 0))
        self.port = self.listener.getsockname()[1]
        self.received: list[bytes] = []
        self.thread = threading.Thread(target=self._serve)
        self.thread.start()

    def _serve(self):
        conn, _ = self.listener.accept()
        try:
            with conn, conn.makefile("rb") as reader:
                for line in reader:
                    self.received.append(line)
                    conn.sendall(b"ack\n")
        except OSError:
            pass
        finally:
            self.listener.close()


def test_run_client_stops_at_logout():
    server = _RecordingServer()
    output = io.StringIO()
    run_client("127.0.0.1", server.port, io.StringIO("hi\nlogout\nignored\n"), output)
    server.thread.join(timeout=5)
    assert server.received == [b"hi\n", b"logout\n"]
    lines = output.getvalue().splitlines()
    assert lines[0] == "Connected to server."
    assert all(line == "Received: ack" for line in lines[1:])


def test_run_client_sends_all_lines_until_end_of_input():
    server = _RecordingServer()
    output = io.StringIO()
    run_client("127.0.0.1", server.port, ["alpha\n", "beta\n", "\n"], output)
    server.thread.join(timeout=5)
    assert server.received == [b"alpha\n", b"beta\n", b"\n"]
    assert output.getvalue().startswith("Connected to server.\n")


def test_run_client_refused_connection():
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(OSError):
        run_client("127.0.0.1", port, io.StringIO("hi\n"), io.StringIO())