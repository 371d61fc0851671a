"""Tests for version parsing and the support matrix."""

import pytest

from featurefence.support import SupportMatrix, SupportTarget, parse_version


class TestParseVersion:
    def test_numeric_and_dotted(self):
        assert parse_version("120") == (120,)
        assert parse_version("15.4") == (15, 4)

    def test_trailing_zero_is_ignored(self):
        assert parse_version("16.0") == parse_version("16")

    def test_compares_numerically(self):
        assert parse_version("9") < parse_version("10")
        assert parse_version("15.10") > parse_version("15.4")

    @pytest.mark.parametrize("bad", ["", "TP", "15.4-15.5", "all", None])
    def test_rejects_non_numeric(self, bad):
        with pytest.raises(ValueError):
            parse_version(bad)


class TestSupportMatrix:
    def test_keeps_lowest_version_per_runtime(self):
        matrix = SupportMatrix([
            SupportTarget("chrome", "120"),
            SupportTarget("chrome", "109"),
            SupportTarget("safari", "17.6"),
            SupportTarget("safari", "18"),
        ])
        assert matrix.to_dict() == {"chrome": "109", "safari": "17.6"}

    def test_targets_sorted_by_runtime(self):
        matrix = SupportMatrix([SupportTarget("safari", "18"), SupportTarget("chrome", "120")])
        assert [t.runtime for t in matrix.targets()] == ["chrome", "safari"]

    def test_equality_and_hash(self):
        a = SupportMatrix([SupportTarget("firefox", "128")])
        b = SupportMatrix([SupportTarget("firefox", "128"), SupportTarget("firefox", "136")])
        assert a == b
        assert hash(a) == hash(b)

    def test_read_only(self):
        matrix = SupportMatrix([SupportTarget("firefox", "128")])
        with pytest.raises(TypeError):
            matrix["chrome"] = SupportTarget("chrome", "1")
