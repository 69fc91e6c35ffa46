"""
Error taxonomy for BloodPledge.
Every failed operation raises exactly one of these; the API layer maps them to HTTP responses.
"""
from typing import Optional


class BloodPledgeError(Exception):
    """Base class for all domain errors."""
    kind = "Error"
    status_code = 500

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def to_dict(self) -> dict:
        return {"error": self.kind, "msg": self.msg}


class NotFound(BloodPledgeError):
    """Referenced id is absent, or a collection query matched nothing."""
    kind = "NotFound"
    status_code = 404


class InvalidPayload(BloodPledgeError):
    """Payload failed validation or a business rule rejected it."""
    kind = "InvalidPayload"
    status_code = 400


class Unauthorized(BloodPledgeError):
    """Supplied password does not match the record's stored credential."""
    kind = "Unauthorized"
    status_code = 401


class AlreadyInit(BloodPledgeError):
    """Reserved; no current operation raises it."""
    kind = "AlreadyInit"
    status_code = 409


class StorageError(BloodPledgeError):
    """Persistence fault. The enclosing unit of work has been rolled back."""
    kind = "InternalError"
    status_code = 500

    def __init__(self, msg: str, cause: Optional[Exception] = None):
        super().__init__(msg)
        self.cause = cause
