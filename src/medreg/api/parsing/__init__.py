from __future__ import annotations

from .payload import parse_medication_body, parse_name_query

__all__ = [
    "parse_medication_body",
    "parse_name_query",
]
