"""The HTTP server that hosts the card API."""

from __future__ import annotations

import logging
import os
import signal
import threading
from collections.abc import Callable, Iterable
from socketserver import ThreadingMixIn
from typing import Any
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from flask import Flask

from ravnica.handler import CardHandler

DEFAULT_PORT = "8080"
SHUTDOWN_TIMEOUT = 10.0

logger = logging.getLogger(__name__)

_WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


class _LoggingRequestHandler(WSGIRequestHandler):
    """Sends the server's own access lines to the module logger."""

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.debug(format, *args)


def _logging_middleware(next_app: _WSGIApp) -> _WSGIApp:
    """Wrap a WSGI application so that each request's method and path are logged."""

    def wrapped(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        logger.info("Request: %s %s", environ.get("REQUEST_METHOD", ""), environ.get("PATH_INFO", ""))
        return next_app(environ, start_response)

    return wrapped


def create_app(handler: CardHandler | None = None) -> Flask:
    """Build the WSGI application with the card routes and request logging."""
    app = Flask(__name__)
    card_handler = handler if handler is not None else CardHandler()
    card_handler.register_routes(app)
    app.wsgi_app = _logging_middleware(app.wsgi_app)  # type: ignore[method-assign]
    return app


class Server:
    """Serves the card API on a port until interrupted."""

    def __init__(self, port: str = DEFAULT_PORT, handler: CardHandler | None = None) -> None:
        self.port = port
        self.addr = ":" + port
        self.app = create_app(handler)
        self.shutdown_requested = threading.Event()

    def start(self) -> None:
        """Serve until SIGINT or SIGTERM arrives, then shut down gracefully."""
        try:
            port = int(self.port)
        except ValueError as exc:
            raise OSError(f"listen tcp {self.addr}: invalid port {self.port!r}") from exc

        httpd = make_server(
            "",
            port,
            self.app,
            server_class=_ThreadingWSGIServer,
            handler_class=_LoggingRequestHandler,
        )

        stop = self.shutdown_requested
        previous = {}
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = signal.signal(signum, lambda *_: stop.set())

        try:
            logger.info("Server starting on %s", self.addr)
            worker = threading.Thread(target=httpd.serve_forever, daemon=True)
            worker.start()

            while not stop.wait(0.2):
                continue

            logger.info("Server is shutting down...")
            httpd.shutdown()
            worker.join(SHUTDOWN_TIMEOUT)
            httpd.server_close()
            logger.info("Server stopped")
        finally:
            for signum, old in previous.items():
                signal.signal(signum, old)


def main(argv: list[str] | None = None) -> None:
    """Start the card API on the port named by ``PORT`` (default 8080)."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    port = os.environ.get("PORT") or DEFAULT_PORT
    try:
        Server(port).start()
    except Exception as exc:
        logger.critical("Failed to start server: %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()