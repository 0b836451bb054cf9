"""Concrete constraints.

Each class is a pure, stateless rule. Multi-value parameters are stored as
tuples so their order survives into messages ("Must be in b, c").
"""

import re
from typing import Any, Callable, Iterable, Optional

from pydantic import Field

from valguard.constraints.base import Constraint

EMAIL_PATTERN = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}"


# ── Null family ──


class Null(Constraint):
    name = "Null"
    null_sensitive = True

    def test(self, value: Any) -> bool:
        return value is None


class NotNull(Constraint):
    name = "NotNull"
    null_sensitive = True

    def test(self, value: Any) -> bool:
        return value is not None


# ── Equality & membership ──


class _SingleValue(Constraint):
    value: Any

    def __init__(self, value: Any, **data: Any):
        super().__init__(value=value, **data)


class _MultiValue(Constraint):
    values: tuple[Any, ...]

    def __init__(self, values: Iterable[Any], **data: Any):
        super().__init__(values=tuple(values), **data)


class Equals(_SingleValue):
    name = "Equals"

    def test(self, value: Any) -> bool:
        return value == self.value


class NotEquals(_SingleValue):
    name = "NotEquals"

    def test(self, value: Any) -> bool:
        return value != self.value


class In(_MultiValue):
    name = "In"

    def test(self, value: Any) -> bool:
        return value in self.values


class NotIn(_MultiValue):
    name = "NotIn"

    def test(self, value: Any) -> bool:
        return value not in self.values


class Valid(Constraint):
    """Custom predicate. Compared by predicate identity."""

    name = "Valid"

    predicate: Callable[[Any], bool] = Field(exclude=True)

    def __init__(self, predicate: Callable[[Any], bool], **data: Any):
        super().__init__(predicate=predicate, **data)

    def test(self, value: Any) -> bool:
        return bool(self.predicate(value))


# ── Text & size ──


class Empty(Constraint):
    name = "Empty"

    def test(self, value: Any) -> bool:
        return len(value) == 0


class NotEmpty(Constraint):
    name = "NotEmpty"
    null_sensitive = True

    def test(self, value: Any) -> bool:
        return value is not None and len(value) > 0


class Blank(Constraint):
    name = "Blank"

    def test(self, value: Any) -> bool:
        return not value.strip()


class NotBlank(Constraint):
    name = "NotBlank"
    null_sensitive = True

    def test(self, value: Any) -> bool:
        return value is not None and bool(value.strip())


class Size(Constraint):
    """Length bounds, inclusive. An unset bound is unbounded."""

    name = "Size"

    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def message_key(self) -> str:
        if self.min is not None and self.max is None:
            return "Size.min"
        if self.max is not None and self.min is None:
            return "Size.max"
        return "Size"

    def test(self, value: Any) -> bool:
        size = len(value)
        if self.min is not None and size < self.min:
            return False
        if self.max is not None and size > self.max:
            return False
        return True


class Matches(Constraint):
    name = "Matches"

    pattern: str

    def __init__(self, pattern: str, **data: Any):
        super().__init__(pattern=pattern, **data)

    def test(self, value: Any) -> bool:
        return re.fullmatch(self.pattern, value) is not None


class Email(Constraint):
    name = "Email"

    def test(self, value: Any) -> bool:
        return re.fullmatch(EMAIL_PATTERN, value) is not None


# ── Containment ──


class Contains(_SingleValue):
    name = "Contains"

    def test(self, value: Any) -> bool:
        return self.value in value


class ContainsAll(_MultiValue):
    name = "ContainsAll"

    def test(self, value: Any) -> bool:
        return all(v in value for v in self.values)


class ContainsAny(_MultiValue):
    name = "ContainsAny"

    def test(self, value: Any) -> bool:
        return any(v in value for v in self.values)


class NotContain(_SingleValue):
    name = "NotContain"

    def test(self, value: Any) -> bool:
        return self.value not in value


class NotContainAll(_MultiValue):
    name = "NotContainAll"

    def test(self, value: Any) -> bool:
        return not all(v in value for v in self.values)


class NotContainAny(_MultiValue):
    name = "NotContainAny"

    def test(self, value: Any) -> bool:
        return not any(v in value for v in self.values)


# ── Comparison ──


class LessThan(_SingleValue):
    name = "LessThan"

    def test(self, value: Any) -> bool:
        return value < self.value


class LessOrEqualTo(_SingleValue):
    name = "LessOrEqualTo"

    def test(self, value: Any) -> bool:
        return value <= self.value


class GreaterThan(_SingleValue):
    name = "GreaterThan"

    def test(self, value: Any) -> bool:
        return value > self.value


class GreaterOrEqualTo(_SingleValue):
    name = "GreaterOrEqualTo"

    def test(self, value: Any) -> bool:
        return value >= self.value


class Between(Constraint):
    """Inclusive range."""

    name = "Between"

    start: Any
    end: Any

    def __init__(self, start: Any, end: Any, **data: Any):
        super().__init__(start=start, end=end, **data)

    def test(self, value: Any) -> bool:
        return self.start <= value <= self.end


ALL_CONSTRAINTS: tuple[type[Constraint], ...] = (
    Null, NotNull, Equals, NotEquals, In, NotIn, Valid,
    Empty, NotEmpty, Blank, NotBlank, Size, Matches, Email,
    Contains, ContainsAll, ContainsAny, NotContain, NotContainAll, NotContainAny,
    LessThan, LessOrEqualTo, GreaterThan, GreaterOrEqualTo, Between,
)
