"""TOML settings, profiles and resolutions."""

from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest

from kalshibars.config.settings import Settings, get_settings, load_config
from kalshibars.models.resolution import Resolution, parse_resolution


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "default.toml").write_text(
        '[exchange]\ntimezone = "America/New_York"\n'
        '[bars]\nresolution = "hour"\nemit_no_side = true\n'
        '[logging]\nlevel = "info"\n'
    )
    (tmp_path / "dev.toml").write_text('[bars]\nemit_no_side = false\n[logging]\nlevel = "debug"\n')
    return tmp_path


def test_defaults_without_config(tmp_path):
    assert load_config(config_dir=tmp_path) == {}
    s = get_settings(config_dir=tmp_path)
    assert s.exchange_timezone == ZoneInfo("America/New_York")
    assert s.resolution is Resolution.MINUTE
    assert s.chunk_interval_days == 3
    assert s.emit_no_side is True
    assert s.logging_level == "INFO"
    assert s.logging_format == "console"


def test_profile_overlay_deep_merges(config_dir):
    s = get_settings("dev", config_dir)
    assert s.resolution is Resolution.HOUR
    assert s.chunk_interval_days == 30
    assert s.emit_no_side is False
    assert s.logging_level == "DEBUG"


def test_missing_profile_file_ignored(config_dir):
    s = get_settings("prod", config_dir)
    assert s.emit_no_side is True


def test_chunk_interval_override():
    s = Settings.from_dict({"bars": {"resolution": "1m", "chunk_interval_days": 2}})
    assert s.chunk_interval_days == 2


def test_resolution_periods():
    assert Resolution.MINUTE.period == timedelta(minutes=1)
    assert Resolution.HOUR.period == timedelta(hours=1)
    assert Resolution.DAILY.period == timedelta(days=1)
    assert [r.period_interval for r in Resolution] == [1, 60, 1440]


@pytest.mark.parametrize(
    "value,expected",
    [("minute", Resolution.MINUTE), ("1h", Resolution.HOUR), (" Daily ", Resolution.DAILY), ("1d", Resolution.DAILY)],
)
def test_parse_resolution(value, expected):
    assert parse_resolution(value) is expected


def test_parse_resolution_unknown():
    with pytest.raises(ValueError):
        parse_resolution("tick")
