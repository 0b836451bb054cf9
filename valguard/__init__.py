"""valguard — declarative object validation with localized violation messages.

Usage:
    from valguard import validate, resolve, ConstraintViolationSet

    try:
        validate(employee, lambda ctx: ctx.validate("id").is_not_null())
    except ConstraintViolationSet as e:
        messages = resolve(e.violations, "pt-BR")
"""

from valguard.engine import (
    ConstraintViolationSet,
    LocalizedViolation,
    PropertyHandle,
    ValidationContext,
    Violation,
    validate,
)
from valguard.i18n import Locale, MessageCatalog, MessageNotFoundError, resolve

__all__ = [
    "validate",
    "resolve",
    "ValidationContext",
    "PropertyHandle",
    "Violation",
    "LocalizedViolation",
    "ConstraintViolationSet",
    "Locale",
    "MessageCatalog",
    "MessageNotFoundError",
]
