"""
Unit tests for generator settings.
"""

import pytest

from logbundle_dsl.api.config import GeneratorSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # no stray .env or LOGBUNDLE_* variables from the developer's shell
    monkeypatch.chdir(tmp_path)
    for name in ("LOGBUNDLE_DEBUG", "LOGBUNDLE_IMPL_SUFFIX", "LOGBUNDLE_OUTPUT_ENCODING"):
        monkeypatch.delenv(name, raising=False)


class TestGeneratorSettings:

    def test_defaults(self):
        settings = GeneratorSettings()

        assert settings.DEBUG is False
        assert settings.IMPL_SUFFIX == "_impl"
        assert settings.OUTPUT_ENCODING == "utf-8"

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", " on "])
    def test_debug_enabled_from_env(self, monkeypatch, raw):
        monkeypatch.setenv("LOGBUNDLE_DEBUG", raw)
        assert GeneratorSettings().DEBUG is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "", "maybe"])
    def test_debug_disabled_from_env(self, monkeypatch, raw):
        monkeypatch.setenv("LOGBUNDLE_DEBUG", raw)
        assert GeneratorSettings().DEBUG is False

    def test_suffix_from_env(self, monkeypatch):
        monkeypatch.setenv("LOGBUNDLE_IMPL_SUFFIX", "Impl")
        assert GeneratorSettings().IMPL_SUFFIX == "Impl"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LOGBUNDLE_DEBUG=yes\n")
        assert GeneratorSettings().DEBUG is True

    def test_overrides(self):
        settings = GeneratorSettings(DEBUG=True, IMPL_SUFFIX="Generated")

        assert settings.DEBUG is True
        assert settings.IMPL_SUFFIX == "Generated"
