"""Interface layer error mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pulse.domain.error import DomainError, ErrorCode, ErrorKind

_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PRECONDITION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    if error.code == ErrorCode.NOT_FOUND_OR_FORBIDDEN:
        return status.HTTP_403_FORBIDDEN
    return _KIND_STATUS[error.code.kind]


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"code", "detail"}``."""
    status_code = status_for(exc)
    logfire.warn(
        "Domain error",
        code=exc.code.value,
        status=status_code,
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content={"code": exc.code.value, "detail": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
