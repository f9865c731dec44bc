from __future__ import annotations


def test_package_exports() -> None:
    import medreg

    assert medreg.run is not None
    assert medreg.serve is not None
    assert medreg.create_app is not None
    assert medreg.MedicationClient is not None
    assert medreg.InMemoryRegistry is not None
    assert medreg.__version__


def test_subpackage_paths() -> None:
    from medreg.api import create_api_app
    from medreg.api.parsing import parse_medication_body, parse_name_query
    from medreg.api.routes import mount_medication_api
    from medreg.core.registry import InMemoryRegistry
    from medreg.runtime.log_config import setup_logging
    from medreg.runtime.server import MedicationServer, run, serve
    from medreg.sdk.client import MedicationClient

    assert create_api_app is not None
    assert parse_medication_body is not None
    assert parse_name_query is not None
    assert mount_medication_api is not None
    assert InMemoryRegistry is not None
    assert setup_logging is not None
    assert MedicationServer is not None
    assert run is not None
    assert serve is not None
    assert MedicationClient is not None
