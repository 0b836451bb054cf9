"""Named checks available on a property handle.

Every method builds a constraint and hands it to ``check()``. Multi-value
checks accept either varargs or a single iterable. The ``*_ignoring_case``
variants lowercase both sides and evaluate the case-sensitive constraint,
while the recorded violation keeps the caller's original arguments.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Callable, Optional

from valguard.constraints.base import Constraint
from valguard.constraints.catalog import (
    Between,
    Blank,
    Contains,
    ContainsAll,
    ContainsAny,
    Email,
    Empty,
    Equals,
    GreaterOrEqualTo,
    GreaterThan,
    In,
    LessOrEqualTo,
    LessThan,
    Matches,
    NotBlank,
    NotContain,
    NotContainAll,
    NotContainAny,
    NotEmpty,
    NotEquals,
    NotIn,
    NotNull,
    Null,
    Size,
    Valid,
)


def _collect(values: tuple) -> tuple:
    """Accept both ``f(a, b, c)`` and ``f([a, b, c])``."""
    if len(values) == 1 and isinstance(values[0], Iterable) and not isinstance(values[0], (str, bytes)):
        return tuple(values[0])
    return values


def _lower(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(v.lower() for v in values)


class ConstraintChecks(ABC):
    """Mixin providing the named checks in terms of ``check()``."""

    @abstractmethod
    def check(self, constraint: Constraint, predicate: Optional[Callable[[Any], bool]] = None):
        ...

    def _ignoring_case(self, constraint: Constraint, normalized: Constraint):
        return self.check(constraint, lambda value: normalized.is_valid(value.lower()))

    # ── Null family ──

    def is_null(self):
        return self.check(Null())

    def is_not_null(self):
        return self.check(NotNull())

    # ── Equality & membership ──

    def is_equal_to(self, value: Any):
        return self.check(Equals(value))

    def is_not_equal_to(self, value: Any):
        return self.check(NotEquals(value))

    def is_in(self, *values: Any):
        return self.check(In(_collect(values)))

    def is_not_in(self, *values: Any):
        return self.check(NotIn(_collect(values)))

    def is_valid(self, predicate: Callable[[Any], bool]):
        return self.check(Valid(predicate))

    def is_equal_to_ignoring_case(self, value: str):
        return self._ignoring_case(Equals(value), Equals(value.lower()))

    def is_not_equal_to_ignoring_case(self, value: str):
        return self._ignoring_case(NotEquals(value), NotEquals(value.lower()))

    def is_in_ignoring_case(self, *values: str):
        values = _collect(values)
        return self._ignoring_case(In(values), In(_lower(values)))

    def is_not_in_ignoring_case(self, *values: str):
        values = _collect(values)
        return self._ignoring_case(NotIn(values), NotIn(_lower(values)))

    # ── Text & size ──

    def is_empty(self):
        return self.check(Empty())

    def is_not_empty(self):
        return self.check(NotEmpty())

    def is_blank(self):
        return self.check(Blank())

    def is_not_blank(self):
        return self.check(NotBlank())

    def has_size(self, min: Optional[int] = None, max: Optional[int] = None):
        return self.check(Size(min=min, max=max))

    def matches(self, pattern: str):
        return self.check(Matches(pattern))

    def is_email(self):
        return self.check(Email())

    # ── Containment ──

    def contains(self, value: Any):
        return self.check(Contains(value))

    def contains_all(self, *values: Any):
        return self.check(ContainsAll(_collect(values)))

    def contains_any(self, *values: Any):
        return self.check(ContainsAny(_collect(values)))

    def does_not_contain(self, value: Any):
        return self.check(NotContain(value))

    def does_not_contain_all(self, *values: Any):
        return self.check(NotContainAll(_collect(values)))

    def does_not_contain_any(self, *values: Any):
        return self.check(NotContainAny(_collect(values)))

    def contains_ignoring_case(self, value: str):
        return self._ignoring_case(Contains(value), Contains(value.lower()))

    def contains_all_ignoring_case(self, *values: str):
        values = _collect(values)
        return self._ignoring_case(ContainsAll(values), ContainsAll(_lower(values)))

    def contains_any_ignoring_case(self, *values: str):
        values = _collect(values)
        return self._ignoring_case(ContainsAny(values), ContainsAny(_lower(values)))

    def does_not_contain_ignoring_case(self, value: str):
        return self._ignoring_case(NotContain(value), NotContain(value.lower()))

    def does_not_contain_all_ignoring_case(self, *values: str):
        values = _collect(values)
        return self._ignoring_case(NotContainAll(values), NotContainAll(_lower(values)))

    def does_not_contain_any_ignoring_case(self, *values: str):
        values = _collect(values)
        return self._ignoring_case(NotContainAny(values), NotContainAny(_lower(values)))

    # ── Comparison ──

    def is_less_than(self, value: Any):
        return self.check(LessThan(value))

    def is_less_than_or_equal_to(self, value: Any):
        return self.check(LessOrEqualTo(value))

    def is_greater_than(self, value: Any):
        return self.check(GreaterThan(value))

    def is_greater_than_or_equal_to(self, value: Any):
        return self.check(GreaterOrEqualTo(value))

    def is_between(self, start: Any, end: Any):
        return self.check(Between(start, end))
