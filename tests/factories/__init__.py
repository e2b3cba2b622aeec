"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_json_document,
    make_storage,
    make_translation_entry,
    make_xml_document,
    make_yaml_document,
    sample_translations,
)

__all__ = [
    "make_json_document",
    "make_storage",
    "make_translation_entry",
    "make_xml_document",
    "make_yaml_document",
    "sample_translations",
]
