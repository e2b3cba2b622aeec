"""Translation sources: readers that populate a storage from a document.

Every source is bound to one stream (a file object opened in binary or text
mode, or an in-memory buffer). Loading reads the whole stream, then rewinds
it when the stream is seekable so a later load re-reads the same content.
Non-seekable streams are read once; repeated loads will find them exhausted.

The document is decoded and shape-checked in full before anything is written,
so a malformed document leaves the storage untouched.
"""

import json
import xml.etree.ElementTree as ElementTree
from abc import ABC, abstractmethod
from typing import IO, Any, AnyStr, Iterator, List

import yaml

from bit_i18n.errors import InvalidSourceFormatError
from bit_i18n.logging import get_module_logger
from bit_i18n.models import TranslationEntry
from bit_i18n.storage import Storage

logger = get_module_logger()


class Source(ABC):
    """Abstract base for translation sources.

    Implementations define how a document is decoded into translation
    entries. Reading, rewinding and writing into a storage are shared.

    Attributes:
        stream: The bound input stream. Not owned; the caller closes it.
    """

    def __init__(self, stream: IO[AnyStr]):
        self.stream = stream

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def parse(self, data: AnyStr) -> List[TranslationEntry]:
        """Decode a whole document into translation entries.

        Args:
            data: Raw document contents.

        Returns:
            Entries in document order.

        Raises:
            InvalidSourceFormatError: If the document has the wrong shape.
        """
        pass

    def read(self) -> AnyStr:
        """Read the whole stream and rewind it if it is seekable."""
        data = self.stream.read()
        seekable = getattr(self.stream, "seekable", None)
        if seekable is not None and seekable():
            self.stream.seek(0)
        return data

    def entries(self) -> Iterator[TranslationEntry]:
        """Read and decode the stream without writing anywhere."""
        return iter(self._decode())

    def load_translations(self, storage: Storage) -> int:
        """Load every translation of the document into a storage.

        Args:
            storage: Storage receiving the translations.

        Returns:
            Number of translations written.

        Raises:
            InvalidSourceFormatError: If the document has the wrong shape.
            OSError: If reading the stream fails.
        """
        entries = self._decode()
        for entry in entries:
            storage.set_translation(entry.value, *entry.path)
        logger.info("translations_loaded", source=self.name, count=len(entries))
        return len(entries)

    def _decode(self) -> List[TranslationEntry]:
        data = self.read()
        try:
            return self.parse(data)
        except InvalidSourceFormatError as e:
            logger.error(
                "translation_source_invalid",
                source=self.name,
                path=e.path,
                error=str(e),
            )
            raise
        except (ValueError, SyntaxError, yaml.YAMLError) as e:
            # JSONDecodeError is a ValueError, ElementTree.ParseError a SyntaxError
            logger.error(
                "translation_source_decode_failed", source=self.name, error=str(e)
            )
            raise


def _entries_from_mapping(data: Any, source: str) -> List[TranslationEntry]:
    """Walk a ``{locale: {scope: {key: value}}}`` mapping."""
    if not isinstance(data, dict):
        raise InvalidSourceFormatError(
            f"expected an object of locales, got {type(data).__name__}",
            source=source,
        )
    _check_names(data, source, "")

    entries = []
    for locale, scopes in data.items():
        _check_mapping(scopes, source, locale, "scopes")
        for scope, translations in scopes.items():
            path = f"{locale}/{scope}"
            _check_mapping(translations, source, path, "translations")
            for key, value in translations.items():
                if not isinstance(value, str):
                    raise InvalidSourceFormatError(
                        f"expected a string translation at {path}/{key}, "
                        f"got {type(value).__name__}",
                        source=source,
                        path=f"{path}/{key}",
                    )
                entries.append(TranslationEntry(locale, scope, key, value))
    return entries


def _check_mapping(value: Any, source: str, path: str, what: str) -> None:
    if not isinstance(value, dict):
        raise InvalidSourceFormatError(
            f"expected an object of {what} at {path}, got {type(value).__name__}",
            source=source,
            path=path,
        )
    _check_names(value, source, path)


def _check_names(mapping: dict, source: str, path: str) -> None:
    # YAML happily produces int, bool or None keys
    for name in mapping:
        if not isinstance(name, str):
            raise InvalidSourceFormatError(
                f"expected string names at '{path}', got {name!r}",
                source=source,
                path=path,
            )


class JSONSource(Source):
    """Source reading a JSON document.

    Expected format:

        {
          "ru": {
            "default": {"Hello.": "Привет.", "How are you?": "Как дела?"},
            "preved": {"Hello.": "Превед."}
          }
        }
    """

    def parse(self, data: AnyStr) -> List[TranslationEntry]:
        return _entries_from_mapping(json.loads(data), self.name)


class YAMLSource(Source):
    """Source reading a YAML document with the same nesting as JSONSource.

    An empty document holds no translations.
    """

    def parse(self, data: AnyStr) -> List[TranslationEntry]:
        document = yaml.safe_load(data)
        if document is None:
            return []
        return _entries_from_mapping(document, self.name)


class XMLSource(Source):
    """Source reading an XML document.

    Expected format, either a bare ``<locale>`` root or a wrapper root whose
    children are ``<locale>`` elements:

        <locales>
          <locale name="de">
            <scope name="default">
              <translation key="Hello." value="Guten Tag." />
            </scope>
            <scope name="bavaria">
              <translation key="Hello." value="Grüß Gott." />
            </scope>
          </locale>
        </locales>

    Elements other than locale, scope and translation are ignored.
    """

    def parse(self, data: AnyStr) -> List[TranslationEntry]:
        root = ElementTree.fromstring(data)
        locales = [root] if root.tag == "locale" else root.findall("locale")

        entries = []
        for locale in locales:
            locale_name = self._attribute(locale, "name", root.tag)
            for scope in locale.findall("scope"):
                scope_name = self._attribute(scope, "name", locale_name)
                path = f"{locale_name}/{scope_name}"
                for translation in scope.findall("translation"):
                    key = self._attribute(translation, "key", path)
                    value = self._attribute(translation, "value", f"{path}/{key}")
                    entries.append(
                        TranslationEntry(locale_name, scope_name, key, value)
                    )
        return entries

    def _attribute(self, element: ElementTree.Element, attribute: str, path: str) -> str:
        value = element.get(attribute)
        if value is None:
            raise InvalidSourceFormatError(
                f"<{element.tag}> at '{path}' is missing the '{attribute}' attribute",
                source=self.name,
                path=path,
            )
        return value
