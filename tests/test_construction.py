"""Mode construction tests"""

import logging
import os
from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from statmode import (
    InvalidModeSourceError,
    Mode,
    ModeError,
    ModeHolder,
    NegativeModeError,
    StatsMode,
    create_mode,
    is_stats_mode,
)


@dataclass
class Stats:
    """Minimal stat record, like a filesystem SDK would return"""

    ino: int
    mode: int
    size: int


class TestCreateModeSources:
    """Accepted mode sources"""

    def test_no_source_defaults_to_zero(self):
        """Should default to mode 0 when nothing is passed"""
        m = create_mode()
        assert isinstance(m, Mode)
        assert m.value_of() == 0
        assert isinstance(m.stat, ModeHolder)

    def test_integer_source(self):
        """Should wrap a bare integer in a fresh holder"""
        m = create_mode(33188)
        assert m.value_of() == 33188
        assert m.stat == ModeHolder(mode=33188)

    def test_integer_sources_do_not_alias(self):
        """Should give each Mode from an integer its own holder"""
        a = Mode(0o100644)
        b = Mode(0o100644)
        a.owner.execute = True
        assert a.to_octal() == "0744"
        assert b.to_octal() == "0644"

    def test_holder_is_aliased(self):
        """Should write changes back to the caller's object"""
        stats = Stats(ino=2, mode=0o100644, size=13)
        m = Mode(stats)
        assert m.stat is stats

        m.owner.execute = True
        m.is_directory(True)
        assert stats.mode == 0o040744
        assert stats.size == 13

    def test_holder_changes_are_visible(self):
        """Should see changes made to the caller's object"""
        holder = ModeHolder(mode=0o100644)
        m = Mode(holder)
        holder.mode = 0o040700
        assert m.is_directory()
        assert m.to_string() == "drwx------"

    def test_non_integer_holder_field_coerced(self):
        """Should set a non-integer mode field to 0"""
        for bad in ("0644", None, 1.5, True):
            holder = SimpleNamespace(mode=bad)
            m = Mode(holder)
            assert m.stat is holder
            assert holder.mode == 0
            assert m.value_of() == 0

    def test_non_integer_holder_field_logged(self, caplog):
        """Should log the coercion at debug level"""
        with caplog.at_level(logging.DEBUG, logger="statmode.mode"):
            Mode(SimpleNamespace(mode="0644"))
        assert "Coercing non-integer mode" in caplog.text

    def test_mode_source_shares_holder(self):
        """Should share the holder of another Mode"""
        a = Mode(0o100644)
        b = Mode(a)
        assert b.stat is a.stat
        b.sticky = True
        assert a.sticky is True
        assert a == b

    def test_stat_result_source(self):
        """Should copy st_mode from an os.stat_result"""
        result = os.stat_result((0o100600, 0, 0, 1, 0, 0, 0, 0, 0, 0))
        m = Mode(result)
        assert m.value_of() == 0o100600
        assert m.stat is not result
        assert m.to_string() == "-rw-------"

    def test_real_stat_of_directory(self, tmp_path):
        """Should read the type of a real directory from os.stat"""
        m = Mode(os.stat(tmp_path))
        assert m.is_directory()
        assert m.to_string()[0] == "d"


class TestCreateModeErrors:
    """Rejected mode sources"""

    def test_negative_integer(self):
        """Should reject negative integers"""
        with pytest.raises(NegativeModeError, match="EINVAL") as exc_info:
            Mode(-1)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.code == "EINVAL"
        assert exc_info.value.operation == "create_mode"
        assert exc_info.value.mode == -1

    def test_bool(self):
        """Should reject bools"""
        with pytest.raises(TypeError, match="bool"):
            Mode(True)

    def test_unsupported_objects(self):
        """Should reject objects without a mode"""
        for bad in ("0644", 1.5, object(), {"mode": 0o644}):
            with pytest.raises(InvalidModeSourceError, match="must pass in"):
                create_mode(bad)

    def test_errors_share_base(self):
        """Should raise ModeError subclasses"""
        with pytest.raises(ModeError):
            Mode("0644")
        with pytest.raises(ModeError):
            Mode(-5)


class TestStatsModeHelpers:
    """Holder type checks"""

    def test_is_stats_mode(self):
        """Should detect objects with an integer mode"""
        assert is_stats_mode(ModeHolder())
        assert is_stats_mode(Stats(ino=1, mode=0, size=0))
        assert not is_stats_mode(None)
        assert not is_stats_mode(0o644)
        assert not is_stats_mode(SimpleNamespace(mode="0644"))
        assert not is_stats_mode(SimpleNamespace(mode=False))

    def test_protocol(self):
        """Should satisfy the StatsMode protocol"""
        assert isinstance(ModeHolder(), StatsMode)
        assert isinstance(Stats(ino=1, mode=0, size=0), StatsMode)
