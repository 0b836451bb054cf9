"""Locale tags and their fallback chain."""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

_TAG_SEPARATOR = re.compile(r"[-_]")


class Locale(BaseModel):
    """Language with optional region. The empty locale is the invariant default."""

    model_config = ConfigDict(frozen=True)

    language: str = ""
    region: str = ""

    @classmethod
    def parse(cls, tag: Optional[Union["Locale", str]]) -> "Locale":
        """Parse ``pt-BR``, ``pt_BR``, ``en`` or ``""``. None is the invariant locale."""
        if isinstance(tag, Locale):
            return tag
        if not tag:
            return INVARIANT
        parts = _TAG_SEPARATOR.split(tag.strip())
        language = parts[0].lower()
        region = parts[1].upper() if len(parts) > 1 else ""
        return cls(language=language, region=region)

    @property
    def tag(self) -> str:
        """Bundle key: ``pt_BR``, ``pt`` or ``""``."""
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    def candidates(self) -> list[str]:
        """Bundle keys to try in order: exact, language-only, invariant."""
        keys = [self.tag]
        if self.region:
            keys.append(self.language)
        if self.language:
            keys.append("")
        return keys

    def __str__(self) -> str:
        return self.tag


INVARIANT = Locale()
