"""Translation models for the i18n package."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TranslationEntry:
    """One translation tuple produced by a source.

    Frozen to ensure immutability and hashability.

    Attributes:
        locale: Locale namespace (e.g., "ru", "de").
        scope: Scope within the locale (e.g., "default").
        key: Lookup key, usually the source-language string.
        value: Translated string.
    """

    locale: str
    scope: str
    key: str
    value: str

    def __str__(self) -> str:
        """Return the slash-separated path of the entry (e.g., "ru/default/Hello.")."""
        return f"{self.locale}/{self.scope}/{self.key}"

    @property
    def path(self) -> Tuple[str, str, str]:
        """The (key, scope, locale) triple in storage argument order."""
        return (self.key, self.scope, self.locale)
