"""Translation storage interface and the default in-memory implementation.

A storage is a table keyed by (locale, scope, key). Argument order follows
the lookup: the most specific part comes first.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Tuple


class Storage(ABC):
    """Abstract base for translation storages.

    Implementations hold translations and answer lookups. Any error met while
    retrieving a translation must be handled inside ``get_translation``;
    a lookup never fails visibly.
    """

    @abstractmethod
    def get_translation(self, key: str, scope: str, locale: str) -> Tuple[str, bool]:
        """Retrieve a translation.

        Args:
            key: Lookup key.
            scope: Scope within the locale.
            locale: Locale namespace.

        Returns:
            Tuple of (translation, found). When not found the first element
            is the key itself.
        """
        pass

    @abstractmethod
    def set_translation(self, value: str, key: str, scope: str, locale: str) -> None:
        """Store a translation, replacing any existing one.

        Args:
            value: Translated string.
            key: Lookup key.
            scope: Scope within the locale.
            locale: Locale namespace.
        """
        pass

    @abstractmethod
    def delete_translation(self, key: str, scope: str, locale: str) -> None:
        """Delete a single translation. Missing paths are ignored."""
        pass

    @abstractmethod
    def delete_scope(self, scope: str, locale: str) -> None:
        """Delete every translation of a scope in one locale."""
        pass

    @abstractmethod
    def delete_locale(self, locale: str) -> None:
        """Delete every translation of a locale."""
        pass


class DefaultStorage(Storage):
    """In-memory storage backed by a nested dict.

    Layout: ``{locale: {scope: {key: translation}}}``. Not safe for
    concurrent mutation; callers must synchronize across threads.
    """

    def __init__(self):
        self._translations: Dict[str, Dict[str, Dict[str, str]]] = {}

    def get_translation(self, key: str, scope: str, locale: str) -> Tuple[str, bool]:
        translations = self._translations.get(locale, {}).get(scope, {})
        if key in translations:
            return translations[key], True
        return key, False

    def set_translation(self, value: str, key: str, scope: str, locale: str) -> None:
        scopes = self._translations.setdefault(locale, {})
        scopes.setdefault(scope, {})[key] = value

    def delete_translation(self, key: str, scope: str, locale: str) -> None:
        self._translations.get(locale, {}).get(scope, {}).pop(key, None)

    def delete_scope(self, scope: str, locale: str) -> None:
        self._translations.get(locale, {}).pop(scope, None)

    def delete_locale(self, locale: str) -> None:
        self._translations.pop(locale, None)

    def locales(self) -> List[str]:
        """Return the stored locales."""
        return list(self._translations)

    def scopes(self, locale: str) -> List[str]:
        """Return the scopes of a locale (empty for unknown locales)."""
        return list(self._translations.get(locale, {}))

    def keys(self, scope: str, locale: str) -> List[str]:
        """Return the translated keys of a scope (empty for unknown paths)."""
        return list(self._translations.get(locale, {}).get(scope, {}))

    def clear(self) -> None:
        """Remove all translations."""
        self._translations.clear()

    def __iter__(self) -> Iterator[Tuple[str, str, str, str]]:
        """Yield (locale, scope, key, translation) tuples."""
        for locale, scopes in self._translations.items():
            for scope, translations in scopes.items():
                for key, value in translations.items():
                    yield locale, scope, key, value

    def __len__(self) -> int:
        return sum(
            len(translations)
            for scopes in self._translations.values()
            for translations in scopes.values()
        )

    def __contains__(self, path: object) -> bool:
        """Check a (key, scope, locale) triple."""
        if not isinstance(path, tuple) or len(path) != 3:
            return False
        key, scope, locale = path
        return self.get_translation(key, scope, locale)[1]
