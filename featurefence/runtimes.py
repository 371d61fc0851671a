"""
Runtime catalog: known runtimes, their versions, usage share and release dates.

Loaded once per process from ``data/runtimes.json`` and read-only afterwards.
"""

import json
import logging
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import DataLoadError
from .support import SupportTarget, parse_version

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
RUNTIMES_FILE = "runtimes.json"


@dataclass(frozen=True)
class RuntimeVersion:
    runtime: str
    version: str
    usage: float
    released: date

    @property
    def target(self) -> SupportTarget:
        return SupportTarget(self.runtime, self.version)


@dataclass(frozen=True)
class Runtime:
    name: str
    title: str
    versions: Tuple[RuntimeVersion, ...]

    @property
    def last_release(self) -> date:
        return max(v.released for v in self.versions)

    def newest(self, count: int) -> Tuple[RuntimeVersion, ...]:
        """The ``count`` most recent versions (by version number)."""
        if count <= 0:
            return ()
        return self.versions[-count:]


def _months_before(day: date, months: int) -> date:
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    return date(year, month + 1, min(day.day, 28))


class RuntimeCatalog:
    """Read-only catalog of runtimes used by the target resolver."""

    def __init__(self, runtimes: Dict[str, Runtime], version: str, snapshot: date):
        self._runtimes: Mapping[str, Runtime] = MappingProxyType(dict(runtimes))
        self.version = version
        self.snapshot = snapshot

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "RuntimeCatalog":
        try:
            snapshot = date.fromisoformat(data["snapshot"])
            runtimes: Dict[str, Runtime] = {}
            for name, entry in data["runtimes"].items():
                versions = [
                    RuntimeVersion(name, str(ver), float(usage), date.fromisoformat(released))
                    for ver, usage, released in entry["versions"]
                ]
                if not versions:
                    raise DataLoadError(f"runtime '{name}' has no versions", source)
                versions.sort(key=lambda v: parse_version(v.version))
                runtimes[name.lower()] = Runtime(name.lower(), entry.get("title", name), tuple(versions))
        except DataLoadError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise DataLoadError(f"invalid runtime catalog: {e}", source) from e
        return cls(runtimes, str(data.get("version", "unknown")), snapshot)

    @classmethod
    def from_path(cls, path: Path) -> "RuntimeCatalog":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DataLoadError(str(e), str(path)) from e
        catalog = cls.from_dict(data, str(path))
        logger.info("Loaded runtime catalog %s (%d runtimes) from %s", catalog.version, len(catalog), path)
        return catalog

    def __len__(self) -> int:
        return len(self._runtimes)

    def get(self, name: str) -> Optional[Runtime]:
        return self._runtimes.get(name.lower())

    def runtimes(self) -> Tuple[Runtime, ...]:
        return tuple(self._runtimes[n] for n in sorted(self._runtimes))

    def all_versions(self) -> Tuple[RuntimeVersion, ...]:
        return tuple(v for rt in self.runtimes() for v in rt.versions)

    def is_dead(self, runtime: Runtime, dead_after_months: int = 24) -> bool:
        """True if the runtime shipped nothing within the staleness window.

        Measured against the catalog snapshot date, not the wall clock.
        """
        cutoff = _months_before(self.snapshot, dead_after_months)
        return runtime.last_release <= cutoff


@lru_cache(maxsize=None)
def load_default_catalog(data_dir: Optional[str] = None) -> RuntimeCatalog:
    """Process-wide catalog handle. Loaded on first use, never mutated."""
    base = Path(data_dir) if data_dir else DATA_DIR
    return RuntimeCatalog.from_path(base / RUNTIMES_FILE)
