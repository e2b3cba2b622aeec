"""Exceptions raised by the i18n package.

Lookup misses are never errors: ``Translator.t`` falls back to the key.
Decoder and I/O errors from sources propagate unchanged; the classes here
cover the failures the package detects itself.
"""


class I18nError(Exception):
    """Base class for all i18n package errors."""


class InvalidSourceFormatError(I18nError, ValueError):
    """A source document decoded fine but does not have the expected shape.

    Attributes:
        source: Name of the source type that rejected the document.
        path: Location inside the document (e.g. ``"ru/default/Hello."``).
    """

    def __init__(self, message: str, source: str = "", path: str = ""):
        self.source = source
        self.path = path
        super().__init__(message)


class UnsupportedSourceFormatError(I18nError, ValueError):
    """No source implementation is registered for a file format."""


class SourceNotConfiguredError(I18nError, RuntimeError):
    """``Translator.load()`` was called on a translator without a source."""
