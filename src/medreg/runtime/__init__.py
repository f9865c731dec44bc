from __future__ import annotations

from .app import create_app
from .log_config import setup_logging
from .server import MedicationServer, bind_socket, run, serve

__all__ = ["create_app", "setup_logging", "MedicationServer", "bind_socket", "run", "serve"]
