from __future__ import annotations

from .medications import mount_medication_api

__all__ = ["mount_medication_api"]
