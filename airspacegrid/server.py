"""An HTTP endpoint that receives JSON action messages."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

log = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 174
ACTION_PATH = "/action"
SUCCESS_BODY = b'{"status": "success"}'


class ActionServer:
    """Serves POST /action, passing each request body to a callback."""

    def __init__(
        self,
        callback: Callable[[str], object],
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
    ):
        self.callback = callback
        self.host = host
        self.port = port
        self._server: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._server is not None

    @property
    def address(self) -> tuple[str, int]:
        """The bound host and port; only available while running."""
        if self._server is None:
            raise RuntimeError("server is not running")
        host, port = self._server.server_address[:2]
        return host, port

    def _handler(self) -> type[BaseHTTPRequestHandler]:
        callback = self.callback

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self) -> None:
                if self.path.split("?", 1)[0] != ACTION_PATH:
                    self.send_error(404)
                    return
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length).decode("utf-8", errors="replace")
                try:
                    callback(body)
                except Exception:
                    log.exception("action callback failed")
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(SUCCESS_BODY)))
                self.end_headers()
                self.wfile.write(SUCCESS_BODY)

            def do_GET(self) -> None:
                self.send_error(404)

            def log_message(self, format: str, *args: object) -> None:
                log.debug(format, *args)

        return Handler

    def start(self) -> None:
        """Bind and serve in a background thread; does nothing if running."""
        if self._server is not None:
            return
        self._server = ThreadingHTTPServer((self.host, self.port), self._handler())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop serving and wait for the background thread."""
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join()
        self._server = None
        self._thread = None

    def __enter__(self) -> ActionServer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()