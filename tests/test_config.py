from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ouiserve.core.errors import RegistryLoadError
from ouiserve.runtime.config import ServiceConfig, normalize_base_url
from ouiserve.runtime.log import configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OUISERVE_SOURCE",
        "OUISERVE_HOST",
        "OUISERVE_PORT",
        "OUISERVE_LOG_LEVEL",
        "OUISERVE_ACCESS_LOG",
        "OUISERVE_CORS_ORIGINS",
        "OUISERVE_URL",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = ServiceConfig.from_env()
    assert cfg == ServiceConfig()
    assert cfg.source == "oui.txt"
    assert cfg.port == 3000
    assert cfg.access_log is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUISERVE_SOURCE", "/data/oui.txt")
    monkeypatch.setenv("OUISERVE_PORT", "8080")
    monkeypatch.setenv("OUISERVE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("OUISERVE_ACCESS_LOG", "0")
    monkeypatch.setenv("OUISERVE_CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("OUISERVE_URL", "127.0.0.1:9999/")

    cfg = ServiceConfig.from_env()
    assert cfg.source == "/data/oui.txt"
    assert cfg.port == 8080
    assert cfg.log_level == "debug"
    assert cfg.access_log is False
    assert cfg.cors_origins == ("http://a.test", "http://b.test")
    assert cfg.attach_url == "http://127.0.0.1:9999"


def test_invalid_port_names_the_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUISERVE_PORT", "abc")

    with pytest.raises(ValueError, match="OUISERVE_PORT"):
        ServiceConfig.from_env()


def test_normalize_base_url() -> None:
    assert normalize_base_url("") == ""
    assert normalize_base_url(" localhost:3000/ ") == "http://localhost:3000"
    assert normalize_base_url("https://oui.example/") == "https://oui.example"


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("loud")


def test_configure_logging_sets_package_level() -> None:
    configure_logging("warning")
    assert logging.getLogger("ouiserve").level == logging.WARNING
    configure_logging("info")


def test_create_app_with_missing_source_fails(tmp_path: Path) -> None:
    from ouiserve.runtime.app import create_app

    with pytest.raises(RegistryLoadError):
        create_app(ServiceConfig(source=str(tmp_path / "missing.txt")))


def test_parse_log_level_matches_uvicorn_levels() -> None:
    from ouiserve.runtime.log import parse_log_level

    assert parse_log_level(" Warning ") == "warning"
    assert parse_log_level("trace") == "trace"
    for bad in ("warn", "fatal", "notset", ""):
        with pytest.raises(ValueError):
            parse_log_level(bad)


def test_invalid_env_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUISERVE_LOG_LEVEL", "WARN")

    with pytest.raises(ValueError, match="Unknown log level"):
        ServiceConfig.from_env()


def test_server_probe_treats_bad_targets_as_not_alive() -> None:
    from ouiserve.runtime.server import _is_server_alive

    assert _is_server_alive("http://exa mple:notaport") is False
    assert _is_server_alive("http://127.0.0.1:1") is False
