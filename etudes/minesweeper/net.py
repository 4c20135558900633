"""Socket and TLS setup shared by the minesweeper server and client."""

from __future__ import annotations

import socket
import ssl
from pathlib import Path

CERT_FILE = "cert.pem"
KEY_FILE = "key.pem"
BACKLOG = 5


class NetError(RuntimeError):
    """Raised when a socket or TLS context cannot be set up."""


def create_server_socket(port: int) -> socket.socket:
    """Return an IPv4 TCP socket bound to all interfaces on port and listening.

    Port 0 picks a free port. Raises NetError if the socket cannot be set up.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise NetError("socket creation failed") from exc
    try:
        sock.bind(("", port))
    except (OSError, OverflowError) as exc:
        sock.close()
        raise NetError("bind failed") from exc
    try:
        sock.listen(BACKLOG)
    except OSError as exc:
        sock.close()
        raise NetError("listen failed") from exc
    return sock


def create_client_socket(port: int, server_ip: str) -> socket.socket:
    """Return an IPv4 TCP socket connected to server_ip on port.

    Raises NetError if the connection cannot be made.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise NetError("socket creation failed") from exc
    try:
        sock.connect((server_ip, port))
    except (OSError, OverflowError) as exc:
        sock.close()
        raise NetError("TCP connection to server failed") from exc
    return sock


def create_context(is_server: bool) -> ssl.SSLContext:
    """Return a fresh TLS context for the server or the client side."""
    protocol = ssl.PROTOCOL_TLS_SERVER if is_server else ssl.PROTOCOL_TLS_CLIENT
    try:
        return ssl.SSLContext(protocol)
    except ssl.SSLError as exc:
        raise NetError("Unable to create SSL context") from exc


def configure_server_context(ctx: ssl.SSLContext) -> None:
    """Install cert.pem and key.pem from the working directory into ctx."""
    try:
        cert_text = Path(CERT_FILE).read_text(encoding="ascii", errors="replace")
    except OSError as exc:
        raise NetError("Unable to install public key certificate") from exc
    if "BEGIN CERTIFICATE" not in cert_text:
        raise NetError("Unable to install public key certificate")
    try:
        ctx.load_cert_chain(CERT_FILE, KEY_FILE)
    except OSError as exc:
        raise NetError("Unable to install private key") from exc


def configure_client_context(ctx: ssl.SSLContext) -> None:
    """Require peer verification and trust cert.pem from the working directory.

    The server uses a self-signed certificate, so the client trusts it directly.
    """
    ctx.verify_mode = ssl.CERT_REQUIRED
    try:
        ctx.load_verify_locations(CERT_FILE)
    except OSError as exc:
        raise NetError("Unable to verify public key certificate") from exc


def set_non_blocking(sock: socket.socket) -> None:
    """Put sock into non-blocking mode."""
    try:
        sock.setblocking(False)
    except OSError as exc:
        raise NetError("Cannot get socket status flag") from exc