"""Process-wide default translator and package-level shortcuts.

The default translator is created by ``init_default_translator()``, usually
once at application start. Without that call it is created on first use from
settings, with an empty storage and no source (plus the optional
``I18N_TRANSLATIONS_FILE``).

Usage:
    import bit_i18n

    bit_i18n.init_default_translator(locale="ru")
    bit_i18n.load_json("translations/ru.json")
    bit_i18n.t("Hello.")
"""

from typing import Optional

from bit_i18n import factory
from bit_i18n.configuration import get_settings
from bit_i18n.logging import get_module_logger
from bit_i18n.sources import JSONSource, Source, XMLSource, YAMLSource
from bit_i18n.storage import Storage
from bit_i18n.translator import Translator

logger = get_module_logger()

_translator: Optional[Translator] = None


def init_default_translator(
    scope: Optional[str] = None,
    locale: Optional[str] = None,
    source: Optional[Source] = None,
    storage: Optional[Storage] = None,
) -> Translator:
    """Create the default translator, replacing any existing one.

    Args:
        scope: Initial scope (default: settings.DEFAULT_SCOPE).
        locale: Initial locale (default: settings.DEFAULT_LOCALE).
        source: Optional source bound for ``load()``.
        storage: Storage to use (default: a new DefaultStorage).

    Returns:
        The new default translator.
    """
    return _install(
        factory.create_translator(
            scope=scope, locale=locale, source=source, storage=storage
        )
    )


def get_default_translator() -> Translator:
    """Return the default translator, creating it from settings if needed.

    A settings translations file that fails to load leaves no default
    translator behind; the next call tries again.
    """
    if _translator is None:
        return _install(
            factory.create_translator(
                translations_file=get_settings().TRANSLATIONS_FILE
            )
        )
    return _translator


def _install(translator: Translator) -> Translator:
    global _translator
    _translator = translator
    logger.info(
        "default_translator_initialized",
        scope=translator.scope,
        locale=translator.locale,
    )
    return translator


def reset_default_translator() -> None:
    """Drop the default translator; the next use creates a fresh one."""
    global _translator
    _translator = None


def t(key: str, scope: Optional[str] = None, locale: Optional[str] = None) -> str:
    """Translate a key with the default translator. See ``Translator.t``."""
    return get_default_translator().t(key, scope, locale)


def set_locale(locale: str) -> None:
    get_default_translator().set_locale(locale)


def set_scope(scope: str) -> None:
    get_default_translator().set_scope(scope)


def load_from(source: Source) -> int:
    """Load translations from a source into the default storage."""
    return get_default_translator().load_from(source)


def load_json(path: factory.PathLike) -> int:
    """Load a JSON translation file into the default storage.

    Example of a JSON translation file:

        {
          "ru": {
            "default": {"Hello.": "Привет.", "How are you?": "Как дела?"},
            "preved": {"Hello.": "Превед.", "How are you?": "Кагдила?"}
          }
        }
    """
    return factory.load_file(get_default_translator().storage, path, JSONSource)


def load_xml(path: factory.PathLike) -> int:
    """Load an XML translation file into the default storage.

    Example of an XML translation file:

        <locale name="de">
          <scope name="default">
            <translation key="Hello." value="Guten Tag." />
          </scope>
          <scope name="bavaria">
            <translation key="Hello." value="Grüß Gott." />
          </scope>
        </locale>
    """
    return factory.load_file(get_default_translator().storage, path, XMLSource)


def load_yaml(path: factory.PathLike) -> int:
    """Load a YAML translation file into the default storage."""
    return factory.load_file(get_default_translator().storage, path, YAMLSource)


def load_file(path: factory.PathLike) -> int:
    """Load a translation file, picking the format from its suffix."""
    return factory.load_file(get_default_translator().storage, path)
