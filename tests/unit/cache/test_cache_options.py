from __future__ import annotations

import pytest

from enum_metadata.cache import CachingMethod, EnumCache, EnumCacheOptions
from enum_metadata.cache.policy import ENV_VAR
from enum_metadata.utils.exceptions import ConfigurationError


def test_options_default_to_explicit():
    assert EnumCacheOptions().caching_method is CachingMethod.EXPLICIT


def test_options_coerce_string_method():
    assert EnumCacheOptions(caching_method="on-first-use").caching_method is CachingMethod.ON_FIRST_USE


def test_options_reject_unknown_method():
    with pytest.raises(ConfigurationError):
        EnumCacheOptions(caching_method="lazy")


def test_from_env_parsing(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "Whole-Type-On-First-Use")
    cfg = EnumCacheOptions.from_env()
    assert cfg.caching_method is CachingMethod.WHOLE_TYPE_ON_FIRST_USE


def test_from_env_without_variable_keeps_base(monkeypatch):
    monkeypatch.delenv(ENV_VAR, raising=False)
    base = EnumCacheOptions(caching_method=CachingMethod.ON_FIRST_USE)
    assert EnumCacheOptions.from_env(base) is base


def test_from_env_blank_variable_keeps_base(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "   ")
    assert EnumCacheOptions.from_env().caching_method is CachingMethod.EXPLICIT


def test_from_env_keeps_telemetry(monkeypatch):
    def telemetry(event, payload):
        return None

    monkeypatch.setenv(ENV_VAR, "on_first_use")
    cfg = EnumCacheOptions.from_env(EnumCacheOptions(telemetry=telemetry))
    assert cfg.telemetry is telemetry
    assert cfg.caching_method is CachingMethod.ON_FIRST_USE


def test_from_env_rejects_unknown_method(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "never")
    with pytest.raises(ConfigurationError):
        EnumCacheOptions.from_env()


def test_from_pyproject_reads_tool_section(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.enum_metadata]\ncaching_method = "on_first_use"\n', encoding="utf-8"
    )
    cfg = EnumCacheOptions.from_pyproject(root=tmp_path)
    assert cfg.caching_method is CachingMethod.ON_FIRST_USE


def test_from_pyproject_without_section_keeps_base(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.other]\nkey = 1\n', encoding="utf-8")
    base = EnumCacheOptions(caching_method=CachingMethod.WHOLE_TYPE_ON_FIRST_USE)
    assert EnumCacheOptions.from_pyproject(base, root=tmp_path) is base


def test_resolve_prefers_environment_over_pyproject(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.enum_metadata]\ncaching_method = "on_first_use"\n', encoding="utf-8"
    )
    monkeypatch.delenv(ENV_VAR, raising=False)
    assert EnumCacheOptions.resolve(root=tmp_path).caching_method is CachingMethod.ON_FIRST_USE

    monkeypatch.setenv(ENV_VAR, "whole_type_on_first_use")
    assert EnumCacheOptions.resolve(root=tmp_path).caching_method is CachingMethod.WHOLE_TYPE_ON_FIRST_USE


def test_resolve_uses_working_directory(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.enum_metadata]\ncaching_method = "whole-type-on-first-use"\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_VAR, raising=False)
    assert EnumCacheOptions.resolve().caching_method is CachingMethod.WHOLE_TYPE_ON_FIRST_USE


def test_cache_emits_telemetry_from_options(registry, color):
    events = []
    cache = EnumCache(
        registry,
        EnumCacheOptions(
            caching_method=CachingMethod.ON_FIRST_USE,
            telemetry=lambda event, payload: events.append(event),
        ),
    )
    cache.get_string_value(color.RED)
    cache.get_string_value(color.RED)
    assert events == ["cache_miss", "cache_populate_member", "cache_hit"]
