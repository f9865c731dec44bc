from __future__ import annotations


class MedicationError(Exception):
    """Base class for client-facing registry errors.

    Each subclass knows the HTTP status it is reported with.
    """

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedInput(MedicationError):
    status_code = 400
    default_message = "Invalid request payload"


class MissingParameter(MedicationError):
    status_code = 400
    default_message = "Missing medication name"


class AlreadyExists(MedicationError):
    status_code = 409
    default_message = "Medication already exists"


class NotFound(MedicationError):
    status_code = 404
    default_message = "Medication not found"


_BY_STATUS: dict[int, type[MedicationError]] = {
    409: AlreadyExists,
    404: NotFound,
}


def error_for_status(status_code: int, message: str | None = None) -> MedicationError:
    """Map an HTTP error status back to the matching error instance."""

    if status_code == 400:
        # Both 400 flavours share a status; the message tells them apart.
        msg = (message or "").strip()
        if msg == MissingParameter.default_message:
            return MissingParameter(msg)
        return MalformedInput(msg or None)
    cls = _BY_STATUS.get(int(status_code))
    if cls is None:
        err = MedicationError(message or f"Unexpected status {status_code}")
        err.status_code = int(status_code)
        return err
    return cls((message or "").strip() or None)
