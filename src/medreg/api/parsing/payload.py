from __future__ import annotations

import json
from typing import Any

from ...core.errors import MalformedInput, MissingParameter
from ...core.medication import Medication

_DECODER = json.JSONDecoder()


def _optional_int(body: dict[str, Any], field: str, default: int) -> int:
    value = body.get(field)
    if value is None:
        return default
    # bool is an int subclass; JSON true/false is not a count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInput()
    return value


def _optional_str(body: dict[str, Any], field: str, default: str) -> str:
    value = body.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise MalformedInput()
    return value


def parse_medication_body(raw: bytes | str) -> Medication:
    """Decode a `{name, count, dosage}` JSON object into a Medication.

    Raises:
    - MalformedInput: not JSON, not an object, or a field has the wrong type.
    - MissingParameter: `name` absent or empty.

    Unknown keys are ignored; absent `count`/`dosage` fall back to 0 / "".
    Only the first JSON value is read; anything after it is left unread.
    """

    try:
        text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else str(raw)
        body, _ = _DECODER.raw_decode(text.lstrip())
    except (TypeError, ValueError) as ex:
        raise MalformedInput() from ex
    if not isinstance(body, dict):
        raise MalformedInput()

    name = _optional_str(body, "name", "")
    if not name:
        raise MissingParameter()

    return Medication(
        name=name,
        count=_optional_int(body, "count", 0),
        dosage=_optional_str(body, "dosage", ""),
    )


def parse_name_query(value: Any) -> str:
    if value is None:
        raise MissingParameter()
    name = str(value)
    if not name:
        raise MissingParameter()
    return name
