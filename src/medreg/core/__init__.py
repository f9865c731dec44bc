from __future__ import annotations

from .errors import (
    AlreadyExists,
    MalformedInput,
    MedicationError,
    MissingParameter,
    NotFound,
    error_for_status,
)
from .medication import Medication
from .registry import InMemoryRegistry
from .settings import Settings

__all__ = [
    "Medication",
    "InMemoryRegistry",
    "Settings",
    "MedicationError",
    "MalformedInput",
    "MissingParameter",
    "AlreadyExists",
    "NotFound",
    "error_for_status",
]
