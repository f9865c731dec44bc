from __future__ import annotations

import pytest

from medreg.api.parsing import parse_medication_body, parse_name_query
from medreg.core import MalformedInput, Medication, MissingParameter


def test_parse_full_body() -> None:
    med = parse_medication_body(b'{"name": "Aspirin", "count": 10, "dosage": "500mg"}')
    assert med == Medication(name="Aspirin", count=10, dosage="500mg")


def test_parse_ignores_unknown_keys_and_defaults_missing_fields() -> None:
    med = parse_medication_body('{"name": "Aspirin", "colour": "white"}')
    assert med == Medication(name="Aspirin", count=0, dosage="")

    med = parse_medication_body('{"name": "Aspirin", "count": null, "dosage": null}')
    assert med == Medication(name="Aspirin", count=0, dosage="")


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b'{"name": "Aspirin"',
        b'["Aspirin", 10, "500mg"]',
        b'"Aspirin"',
        b'{"name": 5}',
        b'{"name": "Aspirin", "count": "10"}',
        b'{"name": "Aspirin", "count": 1.5}',
        b'{"name": "Aspirin", "count": true}',
        b'{"name": "Aspirin", "dosage": 500}',
        b"\xff\xfe",
    ],
)
def test_parse_rejects_malformed_bodies(raw: bytes) -> None:
    with pytest.raises(MalformedInput):
        parse_medication_body(raw)


@pytest.mark.parametrize("raw", [b"{}", b'{"name": ""}', b'{"count": 3, "dosage": "1mg"}'])
def test_parse_requires_name(raw: bytes) -> None:
    with pytest.raises(MissingParameter):
        parse_medication_body(raw)


def test_parse_name_query() -> None:
    assert parse_name_query("Aspirin") == "Aspirin"
    assert parse_name_query(" Aspirin ") == " Aspirin "
    with pytest.raises(MissingParameter):
        parse_name_query(None)
    with pytest.raises(MissingParameter):
        parse_name_query("")


def test_parse_reads_first_value_and_skips_leading_whitespace() -> None:
    med = parse_medication_body(b'  \n{"name": "B", "count": 1} trailing')
    assert med == Medication(name="B", count=1, dosage="")

    med = parse_medication_body(b'{"name": "A", "count": 2}{"name": "C"}')
    assert med == Medication(name="A", count=2, dosage="")
