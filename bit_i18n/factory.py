"""Factory functions for creating i18n components.

Provides convenience functions for building translators with defaults from
settings and for loading translation files by path.
"""

from pathlib import Path
from typing import Dict, Optional, Type, Union

from bit_i18n.configuration import Settings, get_settings
from bit_i18n.errors import UnsupportedSourceFormatError
from bit_i18n.logging import get_module_logger
from bit_i18n.sources import JSONSource, Source, XMLSource, YAMLSource
from bit_i18n.storage import DefaultStorage, Storage
from bit_i18n.translator import Translator

logger = get_module_logger()

PathLike = Union[str, Path]

SOURCE_TYPES: Dict[str, Type[Source]] = {
    ".json": JSONSource,
    ".xml": XMLSource,
    ".yml": YAMLSource,
    ".yaml": YAMLSource,
}


def source_type_for(path: PathLike) -> Type[Source]:
    """Pick the source class for a file from its suffix.

    Raises:
        UnsupportedSourceFormatError: If the suffix is not known.
    """
    suffix = Path(path).suffix.lower()
    try:
        return SOURCE_TYPES[suffix]
    except KeyError as e:
        raise UnsupportedSourceFormatError(
            f"Unsupported translation file format '{suffix}' for {path}"
        ) from e


def load_file(
    storage: Storage,
    path: PathLike,
    source_type: Optional[Type[Source]] = None,
) -> int:
    """Open a translation file, load it into a storage and close it.

    Args:
        storage: Storage receiving the translations.
        path: File to read.
        source_type: Source class to use; picked from the suffix when omitted.

    Returns:
        Number of translations written.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedSourceFormatError: If no source type fits the suffix.
    """
    source_type = source_type or source_type_for(path)
    with open(path, "rb") as f:
        count = source_type(f).load_translations(storage)
    logger.info("translation_file_loaded", path=str(path), count=count)
    return count


def create_translator(
    scope: Optional[str] = None,
    locale: Optional[str] = None,
    source: Optional[Source] = None,
    storage: Optional[Storage] = None,
    translations_file: Optional[PathLike] = None,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        scope: Initial scope (default: settings.DEFAULT_SCOPE).
        locale: Initial locale (default: settings.DEFAULT_LOCALE).
        source: Optional source bound for ``Translator.load()``. Not loaded here.
        storage: Storage to use (default: a new DefaultStorage).
        translations_file: Optional file loaded into the storage right away.
        settings: Settings to take defaults from (default: get_settings()).

    Returns:
        Translator: Configured translator instance

    Usage:
        # Defaults from the environment
        translator = create_translator()

        # Preloaded from a file
        translator = create_translator(locale="ru", translations_file="ru.json")
    """
    settings = settings or get_settings()
    translator = Translator(
        scope=scope or settings.DEFAULT_SCOPE,
        locale=locale or settings.DEFAULT_LOCALE,
        source=source,
        storage=storage if storage is not None else DefaultStorage(),
    )

    if translations_file is not None:
        load_file(translator.storage, translations_file)

    logger.info(
        "translator_created",
        scope=translator.scope,
        locale=translator.locale,
        translations_file=str(translations_file) if translations_file else None,
    )
    return translator
