"""bit_i18n - a minimal translation lookup library.

Translations live in a three-level table (locale -> scope -> key) and are
looked up with a fallback to the key itself. Sources fill the table from
JSON, XML or YAML documents.

Main components:
- storage: Storage interface and DefaultStorage
- sources: Source interface, JSONSource, XMLSource and YAMLSource
- translator: Translator service
- factory: create_translator and file loading helpers
- default: process-wide default translator and shortcuts (t, load_json, ...)
"""

from bit_i18n.default import (
    get_default_translator,
    init_default_translator,
    load_file,
    load_from,
    load_json,
    load_xml,
    load_yaml,
    reset_default_translator,
    set_locale,
    set_scope,
    t,
)
from bit_i18n.errors import (
    I18nError,
    InvalidSourceFormatError,
    SourceNotConfiguredError,
    UnsupportedSourceFormatError,
)
from bit_i18n.factory import create_translator
from bit_i18n.models import TranslationEntry
from bit_i18n.sources import JSONSource, Source, XMLSource, YAMLSource
from bit_i18n.storage import DefaultStorage, Storage
from bit_i18n.translator import Translator

__all__ = [
    "Storage",
    "DefaultStorage",
    "Source",
    "JSONSource",
    "XMLSource",
    "YAMLSource",
    "Translator",
    "TranslationEntry",
    "create_translator",
    "I18nError",
    "InvalidSourceFormatError",
    "SourceNotConfiguredError",
    "UnsupportedSourceFormatError",
    "init_default_translator",
    "get_default_translator",
    "reset_default_translator",
    "t",
    "set_locale",
    "set_scope",
    "load_from",
    "load_json",
    "load_xml",
    "load_yaml",
    "load_file",
]
