from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Medication:
    """A named medication and the quantity on hand.

    Notes:
    - `name` is the identity; lookups use exact string match.
    - `count` has no lower bound, negative stock is accepted as-is.
    """

    name: str
    count: int = 0
    dosage: str = ""

    def with_count(self, count: int) -> "Medication":
        return replace(self, count=int(count))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "count": int(self.count), "dosage": self.dosage}
