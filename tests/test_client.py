import datetime
import ipaddress
import os
import socket
import threading
import time
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from etudes.minesweeper.client import MinesweeperClient, main
from etudes.minesweeper.net import NetError
from etudes.minesweeper.server import MinesweeperServer


def _write_certificate(directory: Path) -> None:
    private_key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "localhost")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .add_extension(
            x509.SubjectAlternativeName(
                [
                    x509.DNSName("localhost"),
                    x509.IPAddress(ipaddress.ip_address("127.0.0.1")),
                ]
            ),
            critical=False,
        )
        .add_extension(
            x509.SubjectKeyIdentifier.from_public_key(private_key.public_key()),
            critical=False,
        )
        .add_extension(
            x509.AuthorityKeyIdentifier.from_issuer_public_key(
                private_key.public_key()
            ),
            critical=False,
        )
        .sign(private_key, hashes.SHA256())
    )
    (directory / "key.pem").write_bytes(
        private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
    )
    (directory / "cert.pem").write_bytes(cert.public_bytes(serialization.Encoding.PEM))


@pytest.fixture
def tls_dir(tmp_path, monkeypatch):
    _write_certificate(tmp_path)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def server(tls_dir):
    received = []
    srv = MinesweeperServer(0, sink=received.append, poll_interval=0.05)
    srv.start()
    yield srv, received
    srv.stop()


def _pipe(data: bytes, close_writer: bool = True):
    reader_fd, writer_fd = os.pipe()
    if data:
        os.write(writer_fd, data)
    if close_writer:
        os.close(writer_fd)
        writer_fd = None
    return os.fdopen(reader_fd, "rb"), writer_fd


def _wait_for(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_disconnect_command(server, capsys):
    srv, received = server
    reader, _ = _pipe(b"disconnect\n", close_writer=False)
    with reader:
        client = MinesweeperClient(srv.port, "localhost", stdin=reader, poll_interval=0.05)
        client.connect()
    assert "Disconnecting..." in capsys.readouterr().out
    assert _wait_for(lambda: b"".join(received) == b"disconnect\n")
    assert client.connected is False


def test_end_of_input_ends_session(server, capsys):
    srv, received = server
    reader, _ = _pipe(b"hello\n")
    with reader:
        client = MinesweeperClient(srv.port, "localhost", stdin=reader, poll_interval=0.05)
        client.connect()
    assert "Send message failed" in capsys.readouterr().out
    assert _wait_for(lambda: b"".join(received) == b"hello\n")


def test_disconnect_from_another_thread(server):
    srv, received = server
    reader, writer_fd = _pipe(b"", close_writer=False)
    client = MinesweeperClient(srv.port, "localhost", stdin=reader, poll_interval=0.05)
    worker = threading.Thread(target=client.connect)
    worker.start()
    try:
        assert _wait_for(lambda: client.connected)
        client.disconnect()
        worker.join(5)
        assert not worker.is_alive()
        assert client.connected is False
        assert received == []
    finally:
        os.close(writer_fd)
        reader.close()


def test_connection_refused(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    client = MinesweeperClient(_free_port(), "127.0.0.1")
    with pytest.raises(NetError, match="TCP connection to server failed"):
        client.connect()


def test_untrusted_server_certificate(server, tls_dir, monkeypatch):
    srv, received = server
    other = tls_dir / "other"
    other.mkdir()
    _write_certificate(other)
    monkeypatch.chdir(other)
    client = MinesweeperClient(srv.port, "localhost")
    with pytest.raises(NetError, match="SSL connection to server failed"):
        client.connect()
    assert received == []


def test_missing_trusted_certificate(server, tls_dir, monkeypatch):
    srv, _ = server
    empty = tls_dir / "empty"
    empty.mkdir()
    monkeypatch.chdir(empty)
    client = MinesweeperClient(srv.port, "localhost")
    with pytest.raises(NetError, match="Unable to verify public key certificate"):
        client.connect()


def test_main_forwards_standard_input(server, monkeypatch, capsys):
    srv, received = server
    reader, _ = _pipe(b"disconnect\n")
    with reader:
        monkeypatch.setattr("sys.stdin", reader)
        assert main(["--port", str(srv.port), "--host", "localhost"]) == 0
    assert "Disconnecting..." in capsys.readouterr().out
    assert _wait_for(lambda: b"".join(received) == b"disconnect\n")


def test_main_reports_refused_connection(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--port", str(_free_port()), "--host", "127.0.0.1"]) == 1
    assert "TCP connection to server failed" in capsys.readouterr().err