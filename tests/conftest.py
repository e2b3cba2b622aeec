"""Shared fixtures for i18n tests.

Provides translation files on disk and a clean default translator per test.
"""

import pytest

import bit_i18n
from tests.factories import (
    make_json_document,
    make_storage,
    make_xml_document,
    make_yaml_document,
)


@pytest.fixture(autouse=True)
def clean_default_translator():
    """Reset the process-wide translator before and after each test."""
    bit_i18n.reset_default_translator()
    yield
    bit_i18n.reset_default_translator()


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with the sample translations in every supported format.

    Returns a directory structure like:
    - ru.json  (ru + de locales)
    - de.xml   (ru + de locales, <locales> wrapper root)
    - de.yml   (ru + de locales)
    """
    (tmp_path / "ru.json").write_bytes(make_json_document())
    (tmp_path / "de.xml").write_bytes(make_xml_document())
    (tmp_path / "de.yml").write_bytes(make_yaml_document())
    return tmp_path


@pytest.fixture
def json_file(translations_dir):
    return translations_dir / "ru.json"


@pytest.fixture
def xml_file(translations_dir):
    return translations_dir / "de.xml"


@pytest.fixture
def yaml_file(translations_dir):
    return translations_dir / "de.yml"


@pytest.fixture
def storage():
    """DefaultStorage pre-filled with the sample translations."""
    return make_storage()
