from __future__ import annotations

from typing import Any

import httpx

from ..core.errors import error_for_status
from ..core.medication import Medication


class MedicationClient:
    """HTTP client for a running medreg server.

    Contract:
    - POST   /add       JSON {name, count, dosage}     -> 201
    - GET    /get?name=                                -> 200 record
    - GET    /getAll                                   -> 200 [record, ...]
    - POST   /update    JSON {name, count, dosage}     -> 200 (count only)
    - DELETE /delete?name=                             -> 200

    Error responses are raised as the matching `MedicationError` subclass.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8080", *, timeout_s: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = float(timeout_s)

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        with httpx.Client(base_url=self.base_url, timeout=self.timeout_s) as client:
            res = client.request(method, path, **kwargs)
        if res.status_code >= 400:
            raise error_for_status(res.status_code, res.text)
        return res

    def add(self, name: str, count: int = 0, dosage: str = "") -> None:
        self._request("POST", "/add", json={"name": name, "count": int(count), "dosage": dosage})

    def get(self, name: str) -> Medication:
        data = self._request("GET", "/get", params={"name": name}).json()
        return Medication(name=str(data["name"]), count=int(data["count"]), dosage=str(data["dosage"]))

    def list(self) -> list[Medication]:
        data = self._request("GET", "/getAll").json()
        return [Medication(name=str(d["name"]), count=int(d["count"]), dosage=str(d["dosage"])) for d in data]

    def update_count(self, name: str, count: int) -> None:
        self._request("POST", "/update", json={"name": name, "count": int(count)})

    def delete(self, name: str) -> None:
        self._request("DELETE", "/delete", params={"name": name})

    def healthy(self) -> bool:
        """Best-effort liveness probe."""
        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout_s) as client:
                r = client.get("/healthz")
        except httpx.HTTPError:
            return False
        return r.status_code == 200 and bool(r.json().get("ok"))
