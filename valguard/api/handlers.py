"""FastAPI integration — renders ConstraintViolationSet as a localized 422 response.

Usage:
    app = FastAPI()
    register_exception_handlers(app)
"""

from typing import Any, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from valguard.engine.models import ConstraintViolationSet, LocalizedViolation

logger = structlog.get_logger()


class ConstraintResponse(BaseModel):
    """Constraint name and its interpolation parameters."""

    name: str
    params: dict[str, Any] = {}


class ViolationResponse(BaseModel):
    """A single localized violation."""

    property: str
    value: Any = None
    constraint: ConstraintResponse
    message: str

    @classmethod
    def from_violation(cls, violation: LocalizedViolation) -> "ViolationResponse":
        return cls(
            property=violation.property_path,
            value=violation.rejected_value,
            constraint=ConstraintResponse(
                name=violation.constraint.name,
                params=violation.constraint.params,
            ),
            message=violation.message,
        )


class ConstraintViolationResponse(BaseModel):
    """Body returned for a request that failed validation."""

    error: str = "constraint_violation"
    violations: list[ViolationResponse]


def preferred_locale(accept_language: Optional[str]) -> Optional[str]:
    """First tag of an Accept-Language header, ignoring quality weights."""
    if not accept_language:
        return None
    first = accept_language.split(",")[0].split(";")[0].strip()
    if not first or first == "*":
        return None
    return first


async def constraint_violation_handler(request: Request, exc: ConstraintViolationSet) -> JSONResponse:
    """Localize the violations for the caller's Accept-Language and return 422."""
    locale = preferred_locale(request.headers.get("accept-language"))
    localized = exc.localized(locale)

    logger.info(
        "constraint_violation",
        path=request.url.path,
        method=request.method,
        locale=locale,
        violations=len(localized),
    )

    body = ConstraintViolationResponse(
        violations=[ViolationResponse.from_violation(v) for v in localized],
    )
    return JSONResponse(status_code=422, content=jsonable_encoder(body))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ConstraintViolationSet handler on an application."""
    app.add_exception_handler(ConstraintViolationSet, constraint_violation_handler)
