from pathlib import Path

from dimquant.config import DEFAULT_FLOAT_PRECISION, load_settings


def test_defaults(monkeypatch):
    for name in ("DIMQUANT_LOG_LEVEL", "DIMQUANT_FLOAT_PRECISION", "DIMQUANT_UNITS_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.float_precision == DEFAULT_FLOAT_PRECISION
    assert settings.units_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DIMQUANT_LOG_LEVEL", "debug")
    monkeypatch.setenv("DIMQUANT_FLOAT_PRECISION", "3")
    monkeypatch.setenv("DIMQUANT_UNITS_FILE", "/tmp/units.txt")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.float_precision == 3
    assert settings.units_file == Path("/tmp/units.txt")


def test_invalid_precision_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("DIMQUANT_FLOAT_PRECISION", "many")
    assert load_settings().float_precision == DEFAULT_FLOAT_PRECISION
    assert "DIMQUANT_FLOAT_PRECISION" in caplog.text
