"""A TLS client that sends lines typed by the player to the minesweeper server."""

from __future__ import annotations

import argparse
import os
import select
import ssl
import sys
from typing import IO

from .net import (
    NetError,
    configure_client_context,
    create_client_socket,
    create_context,
)

PORT = 9023
BUFFER_LEN = 1024
DISCONNECT = b"disconnect\n"

_SOCKET_CLOSED = select.POLLERR | select.POLLHUP | select.POLLNVAL


class MinesweeperClient:
    """Connects to a server over TLS and forwards input until told to stop.

    Input is read from stdin (standard input by default), which must have a
    file descriptor.
    """

    def __init__(
        self,
        port: int,
        server_ip: str,
        stdin: IO | None = None,
        poll_interval: float = 1.0,
    ) -> None:
        self._port = port
        self._server_ip = server_ip
        self._stdin = stdin
        self._poll_interval = poll_interval
        self._running = False
        self._socket: ssl.SSLSocket | None = None

    @property
    def connected(self) -> bool:
        return self._running and self._socket is not None

    def connect(self) -> None:
        """Connect and forward input until disconnect, end of input or failure.

        Raises NetError if the connection or the TLS handshake fails.
        """
        sock = create_client_socket(self._port, self._server_ip)
        try:
            context = create_context(False)
            configure_client_context(context)
            try:
                tls = context.wrap_socket(sock, server_hostname=self._server_ip)
            except OSError as exc:
                raise NetError("SSL connection to server failed") from exc
        except BaseException:
            sock.close()
            raise

        self._socket = tls
        self._running = True
        try:
            self._forward(tls)
        finally:
            self._running = False
            self._socket = None
            tls.close()

    def _forward(self, tls: ssl.SSLSocket) -> None:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        in_fd = stdin.fileno()
        sock_fd = tls.fileno()
        poller = select.poll()
        poller.register(in_fd, select.POLLIN)
        poller.register(sock_fd, 0)

        while self._running:
            events = dict(poller.poll(self._poll_interval * 1000))
            if not self._running:
                break
            if not events:
                continue

            if events.get(sock_fd, 0) & _SOCKET_CLOSED:
                print("Server closed connection!")
                break

            data = os.read(in_fd, BUFFER_LEN)
            try:
                if not data:
                    raise ConnectionError("nothing to send")
                tls.sendall(data)
            except OSError:
                print("Send message failed")
                break

            if data == DISCONNECT:
                print("Disconnecting...")
                break

    def disconnect(self) -> None:
        """Ask a running connect() to end; it returns within one poll interval."""
        self._running = False


def main(argv: list[str] | None = None) -> int:
    """Connect to a server and forward standard input to it."""
    parser = argparse.ArgumentParser(description="Connect to a minesweeper server.")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--host", default="localhost")
    args = parser.parse_args(argv)

    client = MinesweeperClient(args.port, args.host)
    try:
        client.connect()
    except NetError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0