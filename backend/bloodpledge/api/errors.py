"""Maps domain errors to JSON responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import BloodPledgeError, InvalidPayload, StorageError

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: BloodPledgeError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc.msg)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = InvalidPayload("; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ))
    return JSONResponse(error.to_dict(), status_code=error.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BloodPledgeError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
