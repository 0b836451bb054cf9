"""Constraint contract and the built-in constraint catalog."""

from valguard.constraints.base import Constraint
from valguard.constraints.catalog import (
    ALL_CONSTRAINTS,
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

__all__ = [
    "Constraint",
    "ALL_CONSTRAINTS",
    "Null",
    "NotNull",
    "Equals",
    "NotEquals",
    "In",
    "NotIn",
    "Valid",
    "Empty",
    "NotEmpty",
    "Blank",
    "NotBlank",
    "Size",
    "Matches",
    "Email",
    "Contains",
    "ContainsAll",
    "ContainsAny",
    "NotContain",
    "NotContainAll",
    "NotContainAny",
    "LessThan",
    "LessOrEqualTo",
    "GreaterThan",
    "GreaterOrEqualTo",
    "Between",
]
