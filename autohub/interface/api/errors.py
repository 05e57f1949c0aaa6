"""Mapping of domain errors to HTTP responses."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from autohub.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    PermissionDeniedError,
    TransactionConflictError,
    ValidationError,
)
from autohub.util.jwt import JWTError


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_permission_denied(
    request: Request, exc: PermissionDeniedError
) -> JSONResponse:
    return _error(status.HTTP_403_FORBIDDEN, str(exc))


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))


async def handle_model_validation(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    """Domain models reject bad input after FastAPI has parsed the body."""
    messages = [error["msg"] for error in exc.errors()]
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "; ".join(messages))


async def handle_rule_violation(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return _error(status.HTTP_409_CONFLICT, str(exc))


async def handle_transaction_conflict(
    request: Request, exc: TransactionConflictError
) -> JSONResponse:
    logfire.error(
        "Transaction conflict surfaced to client",
        resource=exc.resource,
        identifier=exc.identifier,
        attempts=exc.attempts,
    )
    return _error(status.HTTP_409_CONFLICT, str(exc))


async def handle_jwt_error(request: Request, exc: JWTError) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install one handler per domain error class."""
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(PermissionDeniedError, handle_permission_denied)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(pydantic.ValidationError, handle_model_validation)
    app.add_exception_handler(BusinessRuleViolationError, handle_rule_violation)
    app.add_exception_handler(TransactionConflictError, handle_transaction_conflict)
    app.add_exception_handler(JWTError, handle_jwt_error)
