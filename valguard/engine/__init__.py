"""Validation engine — contexts, path tracking, violations."""

from valguard.engine.context import PropertyHandle, ValidationContext
from valguard.engine.models import ConstraintViolationSet, LocalizedViolation, Violation
from valguard.engine.validator import validate

__all__ = [
    "validate",
    "ValidationContext",
    "PropertyHandle",
    "Violation",
    "LocalizedViolation",
    "ConstraintViolationSet",
]
