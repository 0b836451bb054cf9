"""Message resolver — turns violations into localized display text.

For each violation the template is looked up by the constraint's message
key in the exact locale, then the language-only locale, then the invariant
default bundle. Placeholders are filled from the constraint parameters.
"""

import re
from typing import Any, Iterable, Optional, Union

import structlog

from valguard.config import get_settings
from valguard.engine.models import LocalizedViolation, Violation, unique
from valguard.i18n.catalog import MessageCatalog, default_catalog
from valguard.i18n.locale import Locale

logger = structlog.get_logger()

LIST_SEPARATOR = ", "
PLACEHOLDER = re.compile(r"\{(\w+)\}")


class MessageNotFoundError(LookupError):
    """The invariant default bundle has no template for a message key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No message template for '{key}' in the default bundle")


def _format_param(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return LIST_SEPARATOR.join(str(v) for v in value)
    return str(value)


def find_template(key: str, locale: Locale, catalog: MessageCatalog) -> str:
    """Walk the locale fallback chain for a message key."""
    for tag in locale.candidates():
        template = catalog.lookup(tag, key)
        if template is not None:
            if tag != locale.tag:
                logger.debug("message_fallback", key=key, locale=locale.tag, resolved=tag)
            return template
    raise MessageNotFoundError(key)


def interpolate(template: str, params: dict[str, Any]) -> str:
    """Fill ``{name}`` placeholders from constraint parameters.

    Unknown placeholders and any other braces are left as written.
    """
    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in params:
            return match.group(0)
        return _format_param(params[name])

    return PLACEHOLDER.sub(substitute, template)


def resolve_one(
    violation: Violation,
    locale: Locale,
    catalog: MessageCatalog,
) -> LocalizedViolation:
    template = find_template(violation.constraint.message_key, locale, catalog)
    return LocalizedViolation(
        property_path=violation.property_path,
        rejected_value=violation.rejected_value,
        constraint=violation.constraint,
        message=interpolate(template, violation.constraint.params),
    )


def resolve(
    violations: Iterable[Violation],
    locale: Optional[Union[Locale, str]] = None,
    catalog: Optional[MessageCatalog] = None,
) -> tuple[LocalizedViolation, ...]:
    """Localize violations, keeping their order and dropping repeats.

    Args:
        violations: Violations, typically ``ConstraintViolationSet.violations``
        locale: Locale or tag such as "pt-BR"; None uses the configured default
        catalog: Message catalog; None uses the built-in catalog

    Returns:
        One LocalizedViolation per distinct violation
    """
    if locale is None:
        locale = get_settings().DEFAULT_LOCALE
    locale = Locale.parse(locale)
    catalog = catalog or default_catalog()

    return unique(resolve_one(v, locale, catalog) for v in violations)
