"""A TLS server that accepts minesweeper clients and relays what they send."""

from __future__ import annotations

import argparse
import socket
import ssl
import sys
import threading
from collections.abc import Callable

from .net import (
    NetError,
    configure_server_context,
    create_context,
    create_server_socket,
)

PORT = 9023
BUFFER_LEN = 1024
HANDSHAKE_TIMEOUT = 10.0


def _write_stdout(data: bytes) -> None:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


class MinesweeperServer:
    """Listens for TLS clients on a port and hands each one its own thread.

    Everything a client sends is passed to sink, which by default writes it
    to standard output. Blocking waits wake every poll_interval seconds to
    notice that the server is stopping.
    """

    def __init__(
        self,
        port: int,
        sink: Callable[[bytes], None] | None = None,
        poll_interval: float = 1.0,
    ) -> None:
        self._port = port
        self._sink = sink or _write_stdout
        self._poll_interval = poll_interval
        self._running = False
        self._socket: socket.socket | None = None
        self._context: ssl.SSLContext | None = None
        self._clients: dict[int, threading.Thread] = {}
        self._clients_lock = threading.Lock()

    @property
    def port(self) -> int:
        """The bound port once started, otherwise the requested one."""
        if self._socket is not None:
            return self._socket.getsockname()[1]
        return self._port

    @property
    def running(self) -> bool:
        return self._running

    def __enter__(self) -> MinesweeperServer:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        """Open the listening socket and accept clients in the background.

        Raises NetError if the socket or the TLS context cannot be set up.
        """
        listener = create_server_socket(self._port)
        try:
            context = create_context(True)
            configure_server_context(context)
        except BaseException:
            listener.close()
            raise
        listener.settimeout(self._poll_interval)
        self._socket = listener
        self._context = context
        self._running = True
        threading.Thread(
            target=self._accept_clients, args=(listener, context), daemon=True
        ).start()

    def _accept_clients(self, listener: socket.socket, context: ssl.SSLContext) -> None:
        while self._running:
            try:
                client, _ = listener.accept()
            except TimeoutError:
                continue
            except OSError:
                if not self._running:
                    break
                print("Accept failed", file=sys.stderr)
                continue

            print("New client connected!")
            with self._clients_lock:
                if not self._running:
                    client.close()
                    break
                previous = self._clients.get(client.fileno())
                if previous is not None:
                    previous.join()
                worker = threading.Thread(
                    target=self._handle_client, args=(client, context), daemon=True
                )
                self._clients[client.fileno()] = worker
                worker.start()

    def _handle_client(self, client: socket.socket, context: ssl.SSLContext) -> None:
        try:
            client.settimeout(HANDSHAKE_TIMEOUT)
            tls = context.wrap_socket(client, server_side=True)
        except OSError:
            print("SSL connection to client failed", file=sys.stderr)
            client.close()
            return

        with tls:
            tls.settimeout(self._poll_interval)
            while self._running:
                try:
                    data = tls.recv(BUFFER_LEN)
                except (TimeoutError, ssl.SSLWantReadError):
                    continue
                except OSError:
                    data = b""
                if not data:
                    print("Client closed connection!")
                    break
                self._sink(data)

    def stop(self) -> None:
        """Stop accepting, wait for client threads and close the listening socket."""
        self._running = False
        with self._clients_lock:
            for worker in self._clients.values():
                worker.join()
            self._clients.clear()
        self._context = None
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        print("Server exiting...")


def main(argv: list[str] | None = None) -> int:
    """Run the server until a line is read from standard input."""
    parser = argparse.ArgumentParser(description="Run the minesweeper server.")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)

    server = MinesweeperServer(args.port)
    try:
        server.start()
    except NetError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        sys.stdin.readline()
    finally:
        server.stop()
    return 0