"""Violation models — the records produced by validation and the error that carries them.

Violations are immutable and compared structurally by path, rejected value
and constraint, so collections of them behave as ordered sets.
"""

from typing import TYPE_CHECKING, Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict

from valguard.constraints.base import Constraint

if TYPE_CHECKING:
    from valguard.i18n.catalog import MessageCatalog
    from valguard.i18n.locale import Locale


class Violation(BaseModel):
    """A single constraint failure at one property path."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    property_path: str
    rejected_value: Any = None
    constraint: Constraint

    def __hash__(self) -> int:
        return hash((self.property_path, self.constraint))


class LocalizedViolation(Violation):
    """A violation with its display message resolved for one locale."""

    message: str

    def __hash__(self) -> int:
        return hash((self.property_path, self.constraint, self.message))


def unique(violations: Iterable[Violation]) -> tuple[Violation, ...]:
    """Drop repeated violations, keeping first-seen order."""
    return tuple(dict.fromkeys(violations))


class ConstraintViolationSet(ValueError):
    """Raised once per validate() call when any declared constraint failed."""

    def __init__(self, violations: Iterable[Violation]):
        self.violations: tuple[Violation, ...] = unique(violations)
        super().__init__(
            f"{len(self.violations)} constraint violation(s): "
            + ", ".join(f"{v.property_path} {v.constraint.name}" for v in self.violations)
        )

    def __reduce__(self):
        # Rebuild from the violations, not the formatted message
        return (type(self), (self.violations,))

    def localized(
        self,
        locale: "Optional[Locale | str]" = None,
        catalog: "Optional[MessageCatalog]" = None,
    ) -> tuple[LocalizedViolation, ...]:
        """Resolve every violation's display message for a locale."""
        from valguard.i18n.resolver import resolve

        return resolve(self.violations, locale, catalog)
