"""Base constraint — the contract every validation rule implements.

A constraint is an immutable, named and parameterized predicate. Its name
selects the message template, its parameters fill the template's
placeholders, and two constraints are equal when they are of the same type
with the same parameters.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Constraint(BaseModel, ABC):
    """Abstract base for all constraints.

    Contract:
        - is_valid() is deterministic and side-effect free
        - None is valid unless the constraint is null-sensitive
        - parameters never change after construction
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: ClassVar[str] = ""
    null_sensitive: ClassVar[bool] = False

    @property
    def message_key(self) -> str:
        """Catalog key of the message template."""
        return self.name

    @property
    def params(self) -> dict[str, Any]:
        """Interpolation parameters, in declaration order."""
        return {
            field: getattr(self, field)
            for field, info in type(self).model_fields.items()
            if not info.exclude
        }

    def is_valid(self, value: Any) -> bool:
        if value is None and not self.null_sensitive:
            return True
        return self.test(value)

    @abstractmethod
    def test(self, value: Any) -> bool:
        """Evaluate the rule against a value (non-null unless null-sensitive)."""
        ...

    def __hash__(self) -> int:
        # Parameters may hold unhashable values; equality still compares them
        return hash((type(self), self.message_key))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"
