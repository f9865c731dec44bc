from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    AlreadyExists,
    InMemoryRegistry,
    MalformedInput,
    Medication,
    MedicationError,
    MissingParameter,
    NotFound,
    Settings,
)
from .runtime import MedicationServer, create_app, run, serve
from .sdk import MedicationClient

__all__ = [
    "__version__",
    "run",
    "serve",
    "create_app",
    "MedicationServer",
    "MedicationClient",
    "Medication",
    "InMemoryRegistry",
    "Settings",
    "MedicationError",
    "MalformedInput",
    "MissingParameter",
    "AlreadyExists",
    "NotFound",
]
