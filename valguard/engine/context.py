"""Validation contexts and property handles.

A context is bound to one object and a path prefix. The outermost context
owns the violation collection; child contexts created for nested objects and
collection elements share it and only extend the path.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from valguard.constraints.base import Constraint
from valguard.constraints.checks import ConstraintChecks
from valguard.engine.models import Violation
from valguard.engine.path import join_index, join_property

Block = Callable[["ValidationContext"], None]


class ValidationContext:
    """Scope for declaring property validations against one object."""

    def __init__(self, obj: Any, path: str = "", violations: Optional[dict[str, Violation]] = None):
        self.obj = obj
        self.path = path
        # Keyed by property path: at most one violation per property
        self._violations: dict[str, Violation] = violations if violations is not None else {}

    @property
    def violations(self) -> tuple[Violation, ...]:
        """Violations recorded so far, in declaration order."""
        return tuple(self._violations.values())

    def validate(self, name: str, getter: Optional[Callable[[Any], Any]] = None) -> "PropertyHandle":
        """Start declaring constraints for a property of the bound object.

        Args:
            name: Property name, used for the path and for lookup
            getter: Optional accessor replacing attribute/key lookup

        Returns:
            Handle for chaining constraints or descending into the value
        """
        value = getter(self.obj) if getter is not None else self._lookup(name)
        return PropertyHandle(self, join_property(self.path, name), value)

    def child(self, obj: Any, path: str) -> "ValidationContext":
        """Nested scope sharing this context's violation collection."""
        return ValidationContext(obj, path, self._violations)

    def has_violation(self, path: str) -> bool:
        return path in self._violations

    def record(self, violation: Violation) -> None:
        self._violations.setdefault(violation.property_path, violation)

    def _lookup(self, name: str) -> Any:
        if isinstance(self.obj, Mapping):
            return self.obj[name]
        return getattr(self.obj, name)


class PropertyHandle(ConstraintChecks):
    """A property's path and current value, bound to its context."""

    def __init__(self, context: ValidationContext, path: str, value: Any):
        self.context = context
        self.path = path
        self.value = value

    def check(self, constraint: Constraint, predicate: Optional[Callable[[Any], bool]] = None) -> "PropertyHandle":
        """Evaluate one constraint unless this property already failed.

        A custom predicate replaces ``constraint.is_valid`` but follows the
        same null policy: it only sees None for null-sensitive constraints.
        """
        if self.context.has_violation(self.path):
            return self

        if predicate is None:
            valid = constraint.is_valid(self.value)
        elif self.value is None and not constraint.null_sensitive:
            valid = True
        else:
            valid = predicate(self.value)

        if not valid:
            self.context.record(Violation(
                property_path=self.path,
                rejected_value=self.value,
                constraint=constraint,
            ))
        return self

    def validate(self, block: Block) -> "PropertyHandle":
        """Run a nested block against the property's object. Skipped when None."""
        if self.value is not None:
            block(self.context.child(self.value, self.path))
        return self

    def validate_for_each(self, block: Block) -> "PropertyHandle":
        """Run a nested block against every element, in iteration order. Skipped when None."""
        if self.value is None:
            return self
        for index, element in enumerate(self.value):
            if element is None:
                continue
            block(self.context.child(element, join_index(self.path, index)))
        return self
