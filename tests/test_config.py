import logging

import pytz

import config


def test_int_from_env_rejects_invalid_values(monkeypatch, caplog):
    caplog.set_level(logging.WARNING)

    monkeypatch.setenv("REGIONAL_MAX_WORKERS", "12")
    assert config._int_from_env("REGIONAL_MAX_WORKERS", 8) == 12

    monkeypatch.setenv("REGIONAL_MAX_WORKERS", "lots")
    assert config._int_from_env("REGIONAL_MAX_WORKERS", 8) == 8

    monkeypatch.setenv("REGIONAL_MAX_WORKERS", "0")
    assert config._int_from_env("REGIONAL_MAX_WORKERS", 8) == 8

    monkeypatch.delenv("REGIONAL_MAX_WORKERS")
    assert config._int_from_env("REGIONAL_MAX_WORKERS", 8) == 8
    assert len(caplog.records) == 2


def test_float_from_env(monkeypatch):
    monkeypatch.setenv("LATITUDE", "61.2181")
    assert config._float_from_env("LATITUDE", 41.0) == 61.2181

    monkeypatch.setenv("LATITUDE", "  ")
    assert config._float_from_env("LATITUDE", 41.0) == 41.0

    monkeypatch.setenv("LATITUDE", "north")
    assert config._float_from_env("LATITUDE", 41.0) == 41.0


def test_get_first_env_var_prefers_earlier_names(monkeypatch):
    monkeypatch.delenv("NWS_USER_AGENT", raising=False)
    monkeypatch.setenv("USER_AGENT", "fallback-agent")
    assert config._get_first_env_var("NWS_USER_AGENT", "USER_AGENT") == "fallback-agent"

    monkeypatch.setenv("NWS_USER_AGENT", "primary-agent")
    assert config._get_first_env_var("NWS_USER_AGENT", "USER_AGENT") == "primary-agent"


def test_normalise_units():
    assert config._normalise_units("Metric") == "metric"
    assert config._normalise_units("C") == "metric"
    assert config._normalise_units("imperial") == "imperial"
    assert config._normalise_units(None) == "imperial"
    assert config._normalise_units("kelvin") == "imperial"


def test_load_timezone_falls_back_to_utc():
    assert config._load_timezone("America/Anchorage").zone == "America/Anchorage"
    assert config._load_timezone("Mars/Olympus_Mons") is pytz.utc


def test_dotenv_is_skipped_under_pytest():
    assert config._should_load_env() is False


def test_fonts_are_loaded():
    for font in (config.FONT_REGIONAL_TITLE, config.FONT_REGIONAL_CITY, config.FONT_REGIONAL_TEMP):
        assert font.getbbox("72") is not None
