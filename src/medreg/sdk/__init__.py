from __future__ import annotations

from .client import MedicationClient

__all__ = ["MedicationClient"]
