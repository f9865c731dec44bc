from __future__ import annotations

import logging
import os
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..core.registry import InMemoryRegistry
from ..core.settings import Settings
from ..sdk.client import MedicationClient
from .app import create_app
from .log_config import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MedicationServer:
    host: str
    port: int
    url: str
    registry: InMemoryRegistry = field(repr=False)
    _server: uvicorn.Server = field(repr=False, compare=False)
    _thread: threading.Thread = field(repr=False, compare=False)

    def client(self, *, timeout_s: float = 10.0) -> MedicationClient:
        return MedicationClient(self.url, timeout_s=timeout_s)

    def stop(self, *, timeout_s: float = 5.0) -> None:
        """Ask uvicorn to exit and wait for the serving thread."""
        self._server.should_exit = True
        self._thread.join(timeout=timeout_s)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on host:port. Raises OSError (e.g. port in use)."""

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    if os.name != "nt":
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(128)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def _uvicorn_server(registry: InMemoryRegistry, *, log_level: str, access_log: bool) -> uvicorn.Server:
    config = uvicorn.Config(
        create_app(registry),
        log_level=log_level.lower(),
        access_log=access_log,
    )
    return uvicorn.Server(config)


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    registry: InMemoryRegistry | None = None,
    log_level: str = "warning",
    access_log: bool = False,
    startup_timeout_s: float = 5.0,
) -> MedicationServer:
    """Start a registry server on a background daemon thread.

    `port=0` picks a free port. The socket is bound before the thread starts,
    so a taken port raises OSError here instead of inside uvicorn. If uvicorn
    does not come up within `startup_timeout_s`, RuntimeError is raised.
    """

    registry = registry if registry is not None else InMemoryRegistry()
    sock = bind_socket(host, port)
    bound_port = int(sock.getsockname()[1])

    server = _uvicorn_server(registry, log_level=log_level, access_log=access_log)
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()

    deadline = time.monotonic() + startup_timeout_s
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.01)

    if not server.started:
        server.should_exit = True
        sock.close()
        raise RuntimeError(f"Server failed to start on {host}:{bound_port}")

    url = f"http://{host}:{bound_port}"
    logger.info("Server is running on %s", url)
    return MedicationServer(
        host=host,
        port=bound_port,
        url=url,
        registry=registry,
        _server=server,
        _thread=thread,
    )


def serve(settings: Settings | None = None, registry: InMemoryRegistry | None = None) -> None:
    """Run the server in the foreground until interrupted.

    Failing to bind the listening port is fatal: it is logged and the process
    exits with status 1.
    """

    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as ex:
        logger.critical("Server failed to start: %s", ex)
        raise SystemExit(1) from ex

    server = _uvicorn_server(
        registry if registry is not None else InMemoryRegistry(),
        log_level=settings.log_level,
        access_log=settings.access_log,
    )
    logger.info("Server is running on port %d...", settings.port)
    server.run(sockets=[sock])
