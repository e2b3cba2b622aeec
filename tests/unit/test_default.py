"""Tests for bit_i18n.default module and the package-level shortcuts."""

import io

import pytest

import bit_i18n
from bit_i18n import DefaultStorage, JSONSource
from bit_i18n.configuration import get_settings
from tests.factories import make_xml_document


@pytest.mark.unit
class TestDefaultTranslator:
    """Tests for the process-wide default translator."""

    def test_lazy_default(self):
        """Without setup the default translator is en/default and empty."""
        translator = bit_i18n.get_default_translator()
        assert translator.locale == "en"
        assert translator.scope == "default"
        assert translator.source is None
        assert len(translator.storage) == 0

    def test_get_returns_same_instance(self):
        """get_default_translator() returns one shared instance."""
        assert bit_i18n.get_default_translator() is bit_i18n.get_default_translator()

    def test_init_replaces_instance(self):
        """init_default_translator() installs a new translator."""
        first = bit_i18n.get_default_translator()
        storage = DefaultStorage()
        second = bit_i18n.init_default_translator(
            scope="preved", locale="ru", storage=storage
        )
        assert second is not first
        assert bit_i18n.get_default_translator() is second
        assert second.storage is storage

    def test_reset(self):
        """reset_default_translator() drops the instance."""
        first = bit_i18n.get_default_translator()
        bit_i18n.reset_default_translator()
        assert bit_i18n.get_default_translator() is not first

    def test_lazy_default_loads_settings_file(self, monkeypatch, json_file):
        """I18N_TRANSLATIONS_FILE is loaded when the default is created lazily."""
        monkeypatch.setattr(get_settings(), "TRANSLATIONS_FILE", json_file)
        assert bit_i18n.t("Hello.", "default", "ru") == "Привет."

    def test_lazy_default_failed_file_is_retried(self, monkeypatch, tmp_path, json_file):
        """A settings file that fails to load leaves no half-built default."""
        settings = get_settings()
        monkeypatch.setattr(settings, "TRANSLATIONS_FILE", tmp_path / "missing.json")

        with pytest.raises(FileNotFoundError):
            bit_i18n.t("Hello.")
        with pytest.raises(FileNotFoundError):
            bit_i18n.t("Hello.")

        monkeypatch.setattr(settings, "TRANSLATIONS_FILE", json_file)
        assert bit_i18n.t("Hello.", "default", "ru") == "Привет."

    def test_lazy_default_malformed_file_is_retried(self, monkeypatch, tmp_path):
        """A malformed settings file raises on every lazy creation."""
        path = tmp_path / "broken.json"
        path.write_text('{"ru": {"default": {"Hello.": 5}}}', encoding="utf-8")
        monkeypatch.setattr(get_settings(), "TRANSLATIONS_FILE", path)

        for _ in range(2):
            with pytest.raises(bit_i18n.InvalidSourceFormatError):
                bit_i18n.get_default_translator()


@pytest.mark.unit
class TestPackageShortcuts:
    """Tests for t, set_locale, set_scope and the load helpers."""

    def test_t_without_load_returns_key(self):
        """Nothing loaded: every key translates to itself."""
        assert bit_i18n.t("anything") == "anything"
        assert bit_i18n.t("nil") == "nil"

    def test_load_json_and_set_locale(self, json_file):
        """load_json() then set_locale("ru") translates to Russian."""
        assert bit_i18n.load_json(json_file) == 6
        assert bit_i18n.t("Hello.") == "Hello."
        bit_i18n.set_locale("ru")
        assert bit_i18n.t("Hello.") == "Привет."

    def test_set_scope(self, json_file):
        """set_scope() changes the scope used by t()."""
        bit_i18n.load_json(json_file)
        bit_i18n.set_locale("ru")
        bit_i18n.set_scope("preved")
        assert bit_i18n.t("How are you?") == "Кагдила?"

    def test_load_xml(self, tmp_path):
        """load_xml() loads a bare <locale> document."""
        path = tmp_path / "de.xml"
        path.write_bytes(
            make_xml_document({"de": {"default": {"Hello.": "Guten Tag."}}}, root=None)
        )
        bit_i18n.load_xml(path)
        assert bit_i18n.t("Hello.", "default", "de") == "Guten Tag."

    def test_load_yaml(self, yaml_file):
        """load_yaml() loads a YAML document."""
        bit_i18n.load_yaml(yaml_file)
        assert bit_i18n.t("Hello.", "bavaria", "de") == "Grüß Gott."

    def test_load_file_picks_format(self, xml_file):
        """load_file() picks the source from the suffix."""
        bit_i18n.load_file(xml_file)
        assert bit_i18n.t("Hello.", "preved", "ru") == "Превед."

    def test_load_from(self):
        """load_from() loads any source into the default storage."""
        source = JSONSource(io.BytesIO(b'{"en": {"default": {"colour": "color"}}}'))
        bit_i18n.load_from(source)
        assert bit_i18n.t("colour") == "color"

    def test_load_json_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError and loads nothing."""
        with pytest.raises(FileNotFoundError):
            bit_i18n.load_json(tmp_path / "missing.json")
        assert len(bit_i18n.get_default_translator().storage) == 0

    def test_load_json_malformed(self, tmp_path):
        """A malformed file raises and leaves the storage empty."""
        path = tmp_path / "broken.json"
        path.write_text('{"ru": {"default": {"Hello.": 5}}}', encoding="utf-8")
        with pytest.raises(bit_i18n.InvalidSourceFormatError):
            bit_i18n.load_json(path)
        assert len(bit_i18n.get_default_translator().storage) == 0

    def test_delete_locale_after_load(self, json_file):
        """Deleting the locale makes t() fall back to the key."""
        bit_i18n.load_json(json_file)
        bit_i18n.set_locale("ru")
        bit_i18n.get_default_translator().storage.delete_locale("ru")
        assert bit_i18n.t("Hello.") == "Hello."
