"""HTTP integration for FastAPI applications."""

from valguard.api.handlers import (
    ConstraintViolationResponse,
    ViolationResponse,
    constraint_violation_handler,
    register_exception_handlers,
)

__all__ = [
    "register_exception_handlers",
    "constraint_violation_handler",
    "ConstraintViolationResponse",
    "ViolationResponse",
]
