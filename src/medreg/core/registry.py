from __future__ import annotations

import logging
import threading

from .errors import AlreadyExists, NotFound
from .medication import Medication

logger = logging.getLogger(__name__)


class InMemoryRegistry:
    """Process-local medication store.

    Every public method holds `_lock` for its whole body, so operations never
    interleave. Records are frozen dataclasses; callers can keep what they get
    back without seeing later writes.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._medications: dict[str, Medication] = {}

    def add(self, medication: Medication) -> None:
        with self._lock:
            if medication.name in self._medications:
                raise AlreadyExists()
            self._medications[medication.name] = medication
        logger.debug("Added medication %r", medication.name)

    def get(self, name: str) -> Medication:
        with self._lock:
            med = self._medications.get(name)
        if med is None:
            raise NotFound()
        return med

    def list(self) -> list[Medication]:
        with self._lock:
            return list(self._medications.values())

    def update_count(self, name: str, count: int) -> Medication:
        """Replace only the stored `count`; name and dosage stay untouched."""

        with self._lock:
            current = self._medications.get(name)
            if current is None:
                raise NotFound()
            updated = current.with_count(count)
            self._medications[name] = updated
        logger.debug("Updated count of %r to %d", name, updated.count)
        return updated

    def delete(self, name: str) -> None:
        with self._lock:
            if self._medications.pop(name, None) is None:
                raise NotFound()
        logger.debug("Deleted medication %r", name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._medications)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._medications
