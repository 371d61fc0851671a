"""
Feature compatibility index: feature id -> runtimes/versions that support it.

Built once from ``data/features.json``. There is no write path; a refresh
means building a new index and swapping the handle.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from .exceptions import DataLoadError
from .finding import CompatibilityVerdict
from .runtimes import DATA_DIR
from .support import SupportMatrix, SupportTarget, parse_version

logger = logging.getLogger(__name__)

FEATURES_FILE = "features.json"

_EMPTY: FrozenSet[SupportTarget] = frozenset()


@dataclass(frozen=True)
class FeatureInfo:
    feature_id: str
    title: str
    support: FrozenSet[SupportTarget]


class CompatibilityIndex:
    """Read-only lookup of feature support. Safe for concurrent readers."""

    def __init__(self, features: Iterable[FeatureInfo], version: str = "unknown"):
        self._features: Mapping[str, FeatureInfo] = MappingProxyType(
            {f.feature_id: f for f in features}
        )
        # runtime -> first supporting version, per feature
        self._since: Mapping[str, Mapping[str, SupportTarget]] = MappingProxyType({
            f.feature_id: MappingProxyType({t.runtime: t for t in f.support})
            for f in self._features.values()
        })
        self.version = version

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "CompatibilityIndex":
        try:
            features = []
            for feature_id, entry in data["features"].items():
                support = frozenset(
                    SupportTarget(runtime.lower(), str(since))
                    for runtime, since in entry.get("support", {}).items()
                    if since
                )
                for target in support:
                    parse_version(target.version)
                features.append(FeatureInfo(feature_id, entry.get("title", feature_id), support))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DataLoadError(f"invalid feature data: {e}", source) from e
        return cls(features, str(data.get("version", "unknown")))

    @classmethod
    def from_path(cls, path: Path) -> "CompatibilityIndex":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DataLoadError(str(e), str(path)) from e
        index = cls.from_dict(data, str(path))
        logger.info("Loaded compatibility index %s (%d features) from %s", index.version, len(index), path)
        return index

    def __len__(self) -> int:
        return len(self._features)

    def support_for(self, feature_id: str) -> FrozenSet[SupportTarget]:
        """Targets supporting the feature. Empty means unknown."""
        info = self._features.get(feature_id)
        return info.support if info is not None else _EMPTY

    def feature(self, feature_id: str) -> Optional[FeatureInfo]:
        return self._features.get(feature_id)

    def verdict(self, feature_id: str, matrix: SupportMatrix) -> CompatibilityVerdict:
        """Check one feature against every target of the matrix.

        A runtime absent from a known feature's support data lacks support;
        an unknown feature is reported as supported.
        """
        verdict = CompatibilityVerdict(feature_id)
        since = self._since.get(feature_id)
        if not since:
            return verdict
        for target in matrix.targets():
            first = since.get(target.runtime)
            if first is None or target.version_key < first.version_key:
                verdict.unsupported_on.append(target)
        return verdict


@lru_cache(maxsize=None)
def load_default_index(data_dir: Optional[str] = None) -> CompatibilityIndex:
    """Process-wide index handle. Loaded on first use, never mutated."""
    base = Path(data_dir) if data_dir else DATA_DIR
    return CompatibilityIndex.from_path(base / FEATURES_FILE)
