"""Validation entry point.

Usage:
    def employee_rules(ctx):
        ctx.validate("id").is_not_null()
        ctx.validate("company").validate(company_rules)
        ctx.validate("dependents").validate_for_each(dependent_rules)

    validate(employee, employee_rules)   # raises ConstraintViolationSet
"""

import time
from typing import TypeVar

import structlog

from valguard.engine.context import Block, ValidationContext
from valguard.engine.models import ConstraintViolationSet

logger = structlog.get_logger()

T = TypeVar("T")


def validate(obj: T, block: Block) -> T:
    """Run a declaration block against an object.

    Args:
        obj: Root of the object graph
        block: Callable receiving the root ValidationContext

    Returns:
        The same object, when no constraint failed

    Raises:
        ConstraintViolationSet: with every violation, in declaration order
    """
    start_time = time.perf_counter()

    context = ValidationContext(obj)
    block(context)
    violations = context.violations

    logger.debug(
        "validation_complete",
        root=type(obj).__name__,
        violations=len(violations),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )

    if violations:
        raise ConstraintViolationSet(violations)
    return obj
