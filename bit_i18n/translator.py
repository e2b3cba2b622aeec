"""Translator service for looking up translated strings.

A Translator combines a storage with a current scope and locale, and
optionally a source it can (re)load translations from. Several translators
with different scopes and locales may share one storage.
"""

from typing import Optional

from bit_i18n.errors import SourceNotConfiguredError
from bit_i18n.logging import get_module_logger
from bit_i18n.sources import Source
from bit_i18n.storage import Storage

logger = get_module_logger()


class Translator:
    """Service for translating keys within a scope and locale.

    Lookups never fail: a missing locale, scope or key returns the key
    itself. An empty or ``None`` override means "use the current value".

    Attributes:
        scope: Current scope used when no scope override is given.
        locale: Current locale used when no locale override is given.
        source: Source loaded by ``load()``, or None.
        storage: Storage queried by ``t()`` and filled by the load methods.
    """

    def __init__(
        self,
        scope: str,
        locale: str,
        source: Optional[Source],
        storage: Storage,
    ):
        """Initialize Translator.

        Args:
            scope: Initial scope.
            locale: Initial locale.
            source: Optional source for ``load()``.
            storage: Storage holding the translations.
        """
        self._scope = scope
        self._locale = locale
        self._source = source
        self._storage = storage

    @property
    def scope(self) -> str:
        return self._scope

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def source(self) -> Optional[Source]:
        return self._source

    @property
    def storage(self) -> Storage:
        return self._storage

    def t(self, key: str, scope: Optional[str] = None, locale: Optional[str] = None) -> str:
        """Translate a key.

        Args:
            key: Lookup key, returned unchanged when no translation exists.
            scope: Scope override; None or "" uses the current scope.
            locale: Locale override; None or "" uses the current locale.

        Returns:
            The translation, or the key.
        """
        translation, found = self._storage.get_translation(
            key, scope or self._scope, locale or self._locale
        )
        return translation if found else key

    def load(self) -> int:
        """Load translations from the bound source into the storage.

        Returns:
            Number of translations written.

        Raises:
            SourceNotConfiguredError: If no source is bound.
        """
        if self._source is None:
            raise SourceNotConfiguredError("translator has no source to load from")
        return self._source.load_translations(self._storage)

    def load_from(self, source: Source) -> int:
        """Load translations from any source without binding it.

        Args:
            source: Source to read.

        Returns:
            Number of translations written.
        """
        return source.load_translations(self._storage)

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def set_scope(self, scope: str) -> None:
        self._scope = scope

    def set_source(self, source: Optional[Source]) -> None:
        self._source = source

    def __repr__(self) -> str:
        return (
            f"Translator(scope={self._scope!r}, locale={self._locale!r}, "
            f"source={type(self._source).__name__ if self._source else None})"
        )
