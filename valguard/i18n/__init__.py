"""i18n — locale fallback and message interpolation for violations."""

from valguard.i18n.catalog import MessageCatalog, default_catalog
from valguard.i18n.locale import INVARIANT, Locale
from valguard.i18n.resolver import MessageNotFoundError, resolve

__all__ = [
    "resolve",
    "Locale",
    "INVARIANT",
    "MessageCatalog",
    "MessageNotFoundError",
    "default_catalog",
]
