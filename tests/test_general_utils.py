# tests/test_general_utils.py
"""Config loading (load_config, settings) and the topic debug logger."""

from __future__ import annotations

import io
import json
import os
from importlib import import_module

import pytest

LC = import_module("color_palette_builder.utils.load_config")
LOG = import_module("color_palette_builder.utils.log")
ST = import_module("color_palette_builder.utils.settings")


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via PALETTE_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("PALETTE_DATA_DIR", str(data))
    LC.clear_config_cache()
    yield data
    LC.clear_config_cache()


def _write(path, payload) -> None:
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload, encoding="utf-8")


# ---------- load_config ----------
def test_load_config_returns_copies_from_cache(tmp_data_dir, monkeypatch):
    _write(tmp_data_dir / "thing.json", {"a": 1})
    first = LC.load_config("thing")
    first["a"] = 99

    reads = []
    real_loads = LC.json.loads
    monkeypatch.setattr(LC.json, "loads", lambda s: reads.append(s) or real_loads(s))
    second = LC.load_config("thing.json")
    assert second == {"a": 1}
    assert reads == []


def test_load_config_missing_file(tmp_data_dir):
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_config("nope")


def test_load_config_refuses_escape(tmp_data_dir):
    _write(tmp_data_dir.parent / "outside.json", {})
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_config("../outside")


def test_load_config_parse_error(tmp_data_dir):
    _write(tmp_data_dir / "broken.json", "{not json")
    with pytest.raises(LC.ConfigParseError):
        LC.load_config("broken")


def test_load_config_non_object_is_type_error(tmp_data_dir):
    _write(tmp_data_dir / "list.json", [1, 2])
    with pytest.raises(LC.ConfigTypeError):
        LC.load_config("list")


def test_load_config_validator_failure_is_parse_error(tmp_data_dir):
    _write(tmp_data_dir / "cfg.json", {"x": 1})

    def _bad(_):
        raise ValueError("nope")

    with pytest.raises(LC.ConfigParseError):
        LC.load_config("cfg", validator=_bad)


def test_load_config_validates_cached_file_every_call(tmp_data_dir):
    _write(tmp_data_dir / "cfg.json", {"x": 1})
    seen = []

    def _count(data):
        seen.append(data)
        return data

    LC.load_config("cfg", validator=_count)
    LC.load_config("cfg", validator=_count)
    assert seen == [{"x": 1}, {"x": 1}]


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.delenv("PALETTE_DATA_DIR", raising=False)
    with LC.temp_data_dir(tmp_path):
        assert LC._env_data_dir() == tmp_path.resolve()
    assert "PALETTE_DATA_DIR" not in os.environ


# ---------- settings ----------
def test_packaged_settings_are_defaults(monkeypatch):
    monkeypatch.delenv("PALETTE_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    assert ST.get_settings() == ST.PaletteSettings()


def test_settings_from_file(tmp_data_dir):
    _write(tmp_data_dir / "palette_settings.json", {"max_colors": 5, "quantizer": "kmeans"})
    s = ST.get_settings()
    assert s.max_colors == 5
    assert s.quantizer == "kmeans"
    assert s.dedup_threshold == 30.0


def test_settings_missing_file_falls_back(tmp_data_dir):
    assert ST.get_settings() == ST.PaletteSettings()


@pytest.mark.parametrize(
    "payload",
    [
        {"quantizer": "octree"},
        {"max_colors": 1},
        {"max_colors": "8"},
        {"quality": 0},
        {"dedup_threshold": -1},
        {"colour": "red"},
    ],
)
def test_settings_validation(tmp_data_dir, payload):
    _write(tmp_data_dir / "palette_settings.json", payload)
    with pytest.raises(LC.ConfigParseError):
        ST.get_settings()


# ---------- log ----------
def test_debug_respects_topics(monkeypatch):
    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "normalize")
    LOG.reload_topics()
    out = io.StringIO()
    LOG.debug("hello", topic="normalize", stream=out)
    LOG.debug("hidden", topic="extraction", stream=out)
    text = out.getvalue()
    assert "[normalize][DEBUG] hello" in text
    assert "hidden" not in text

    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert LOG.is_topic_enabled("extraction")

    monkeypatch.delenv("PALETTE_DEBUG_TOPICS")
    LOG.reload_topics()
    assert not LOG.is_topic_enabled("normalize")
