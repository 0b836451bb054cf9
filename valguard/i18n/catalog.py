"""Message catalogs — per-locale bundles of message templates.

Bundles are JSON files named ``messages.json`` (invariant default) and
``messages_<tag>.json`` (``messages_en.json``, ``messages_pt_BR.json``),
each an object mapping a constraint message key to a template with
``{placeholder}`` names. Directories passed later override earlier ones
key by key.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Union

import structlog

from valguard.config import get_settings

logger = structlog.get_logger()

MESSAGES_DIR = Path(__file__).parent / "messages"
BUNDLE_PREFIX = "messages"


def _bundle_tag(path: Path) -> str:
    """``messages_pt_BR.json`` -> ``pt_BR``; ``messages.json`` -> ``""``."""
    if path.stem == BUNDLE_PREFIX:
        return ""
    return path.stem[len(BUNDLE_PREFIX) + 1:]


class MessageCatalog:
    """Read-only mapping of (locale tag, message key) to template."""

    def __init__(self, bundles: Optional[dict[str, dict[str, str]]] = None):
        self._bundles: dict[str, dict[str, str]] = {
            tag: dict(messages) for tag, messages in (bundles or {}).items()
        }

    @classmethod
    def from_directories(cls, *directories: Union[str, Path]) -> "MessageCatalog":
        """Load every ``messages*.json`` bundle found in the given directories."""
        catalog = cls()
        for directory in directories:
            catalog._load_directory(Path(directory))
        return catalog

    def _load_directory(self, directory: Path) -> None:
        if not directory.is_dir():
            logger.warning("messages_dir_missing", path=str(directory))
            return

        default_file = directory / f"{BUNDLE_PREFIX}.json"
        bundle_files = [default_file] if default_file.is_file() else []
        bundle_files += sorted(directory.glob(f"{BUNDLE_PREFIX}_*.json"))

        for json_file in bundle_files:
            try:
                messages = json.loads(json_file.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("messages_bundle_unreadable", path=str(json_file), error=str(e))
                continue
            if not isinstance(messages, dict):
                logger.warning("messages_bundle_invalid", path=str(json_file))
                continue
            self._bundles.setdefault(_bundle_tag(json_file), {}).update(messages)

    @property
    def tags(self) -> list[str]:
        return sorted(self._bundles)

    def lookup(self, tag: str, key: str) -> Optional[str]:
        """Template for a key in one bundle, or None."""
        return self._bundles.get(tag, {}).get(key)

    def missing_keys(self, keys: Iterable[str]) -> list[str]:
        """Keys absent from the invariant default bundle."""
        default = self._bundles.get("", {})
        return [key for key in keys if key not in default]


@lru_cache
def default_catalog() -> MessageCatalog:
    """Built-in bundles, overlaid with VALGUARD_MESSAGES_DIR when set."""
    directories: list[Union[str, Path]] = [MESSAGES_DIR]
    extra = get_settings().MESSAGES_DIR
    if extra:
        directories.append(extra)
    return MessageCatalog.from_directories(*directories)
