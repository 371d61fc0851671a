"""Tests for the runtime catalog."""

import json

import pytest

from featurefence import DataLoadError, RuntimeCatalog


class TestRuntimeCatalog:
    def test_default_catalog_loads(self, catalog):
        assert catalog.version == "2025.06.0"
        assert catalog.get("CHROME") is catalog.get("chrome") is not None
        assert catalog.get("netscape") is None

    def test_versions_sorted_numerically(self, catalog):
        versions = [v.version for v in catalog.get("safari").versions]
        assert versions == sorted(versions, key=lambda v: tuple(int(p) for p in v.split(".")))
        assert catalog.get("chrome").newest(2)[-1].version == "136"

    def test_dead_runtimes(self, catalog):
        assert catalog.is_dead(catalog.get("ie"))
        assert catalog.is_dead(catalog.get("bb"))
        assert not catalog.is_dead(catalog.get("chrome"))

    def test_dead_window_is_relative_to_snapshot(self, catalog):
        # snapshot 2025-06-01; firefox last shipped 2025-04-01
        assert not catalog.is_dead(catalog.get("firefox"), dead_after_months=3)
        assert catalog.is_dead(catalog.get("firefox"), dead_after_months=2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError):
            RuntimeCatalog.from_path(tmp_path / "runtimes.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "runtimes.json"
        path.write_text(json.dumps({"snapshot": "2025-06-01", "runtimes": {"x": {"versions": [["1"]]}}}))
        with pytest.raises(DataLoadError):
            RuntimeCatalog.from_path(path)
