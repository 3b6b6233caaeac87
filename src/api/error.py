"""Error responses for the HTTP layer

Use case errors are raised as ClientError and rendered as
``{"error": {"code": ..., "message": ..., "details": ...}}``.
"""

import logging
from typing import Dict, List
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "COMPANY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CLIENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVOICE_NUMBER_CONFLICT": status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        """Pick the HTTP status for a use case error code"""
        if error.code in ERROR_STATUS_CODES:
            return cls(error, status_code=ERROR_STATUS_CODES[error.code])
        if error.code.endswith("_FAILED"):
            return cls(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return cls(error)


def _error_body(error: Error) -> dict:
    body = {"code": error.code, "message": error.message}
    if error.details:
        body["details"] = error.details
    return {"error": body}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error.code} ({exc.error.reason})")
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.error))


def field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """Flatten pydantic errors into {"items.0.quantity": ["..."]}"""
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if len(loc) > 1 and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        errors.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return errors


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = Error(
        code="VALIDATION_ERROR",
        message="The given data was invalid.",
        details=field_errors(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(error),
    )
