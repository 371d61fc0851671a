"""
Target resolver: turns a browserslist-style query into a support matrix.

Supported tokens (comma or ``or`` separated, case-insensitive)::

    >=0.5%   >1%   <=2%   <0.1%      usage share of a runtime version
    last 2 versions                   newest N versions of every runtime
    last 3 firefox versions           newest N versions of one runtime
    safari >= 15.4   chrome 120       version ranges of one runtime
    dead                              every version of a stale runtime
    defaults                          the default query
    not <any of the above>            exclusion

Inclusions are unioned in order; exclusions are subtracted afterwards no
matter where they appear. Bad tokens are skipped and annotated.
"""

import logging
import operator
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple

from .exceptions import MalformedTarget
from .finding import Annotation
from .runtimes import RuntimeCatalog, load_default_catalog
from .support import SupportMatrix, SupportTarget, parse_version

logger = logging.getLogger(__name__)

DEFAULT_QUERY = ">=0.5%, last 2 versions, not dead"
DEFAULT_DEAD_AFTER_MONTHS = 24

_SPLIT_RE = re.compile(r"\s*,\s*|\s+or\s+", re.IGNORECASE)
_NOT_RE = re.compile(r"^not\s+(.+)$")
_USAGE_RE = re.compile(r"^(>=|<=|>|<)\s*(\d+(?:\.\d+)?)\s*%$")
_LAST_RE = re.compile(r"^last\s+(\d+)\s+versions?$")
_LAST_RUNTIME_RE = re.compile(r"^last\s+(\d+)\s+([a-z_]+)\s+versions?$")
_RANGE_RE = re.compile(r"^([a-z_]+)\s*(>=|<=|>|<)\s*(\d+(?:\.\d+)*)$")
_EXACT_RE = re.compile(r"^([a-z_]+)\s+(\d+(?:\.\d+)*)$")

_OPS = {
    ">=": operator.ge,
    ">": operator.gt,
    "<=": operator.le,
    "<": operator.lt,
}

Selector = Callable[["TargetResolver"], Set[SupportTarget]]


@dataclass
class ResolvedTargets:
    """Outcome of resolving one query."""
    query: str
    matrix: SupportMatrix
    annotations: List[Annotation] = field(default_factory=list)
    used_default: bool = False


def split_query(query: str) -> List[str]:
    """Split a query into lower-cased, stripped tokens (empty ones dropped)."""
    if not query:
        return []
    return [t.strip().lower() for t in _SPLIT_RE.split(query.strip()) if t and t.strip()]


class TargetResolver:
    """Resolves target queries against a runtime catalog."""

    def __init__(
        self,
        catalog: Optional[RuntimeCatalog] = None,
        dead_after_months: int = DEFAULT_DEAD_AFTER_MONTHS,
        default_query: str = DEFAULT_QUERY,
    ):
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.dead_after_months = dead_after_months
        self.default_query = default_query

    def resolve(self, query: Optional[str]) -> ResolvedTargets:
        """Resolve ``query``; empty or unusable queries fall back to the default."""
        query = (query or "").strip()
        if not query:
            matrix, _ = self._evaluate(split_query(self.default_query), [])
            return ResolvedTargets(query="", matrix=matrix, used_default=True)

        annotations: List[Annotation] = []
        matrix, inclusions = self._evaluate(split_query(query), annotations)
        if inclusions and len(matrix):
            return ResolvedTargets(query=query, matrix=matrix, annotations=annotations)

        if inclusions:
            reason = "Target query matched no runtimes; using default targets"
        else:
            reason = "Target query has no usable inclusion; using default targets"
        annotations.append(Annotation(f"{reason} ({self.default_query})"))
        logger.info("%s: %r", reason, query)
        matrix, _ = self._evaluate(split_query(self.default_query), [])
        return ResolvedTargets(query=query, matrix=matrix, annotations=annotations, used_default=True)

    def _evaluate(self, tokens: List[str], annotations: List[Annotation]) -> Tuple[SupportMatrix, int]:
        included: Set[SupportTarget] = set()
        excluded: Set[SupportTarget] = set()
        inclusions = 0
        for token in tokens:
            try:
                negate, selector = self.parse_token(token)
                selected = selector(self)
            except MalformedTarget as e:
                logger.info("Skipping target token: %s", e)
                annotations.append(Annotation(str(e), token=e.token))
                continue
            if negate:
                excluded |= selected
            else:
                included |= selected
                inclusions += 1
        return SupportMatrix(included - excluded), inclusions

    def parse_token(self, token: str) -> Tuple[bool, Selector]:
        """Parse one token into (is_exclusion, selector).

        Raises:
            MalformedTarget: If the token is not part of the grammar
        """
        m = _NOT_RE.match(token)
        if m:
            _, selector = self._parse_selector(m.group(1).strip(), token)
            return True, selector
        return self._parse_selector(token, token)

    def _parse_selector(self, text: str, token: str) -> Tuple[bool, Selector]:
        if text == "dead":
            return False, lambda r: r._dead()
        if text == "defaults":
            return False, lambda r: set(r._evaluate(split_query(r.default_query), [])[0].targets())

        m = _USAGE_RE.match(text)
        if m:
            op, share = _OPS[m.group(1)], float(m.group(2))
            return False, lambda r: {
                v.target for v in r.catalog.all_versions() if op(v.usage, share)
            }

        m = _LAST_RE.match(text)
        if m:
            count = int(m.group(1))
            return False, lambda r: {
                v.target for rt in r.catalog.runtimes() for v in rt.newest(count)
            }

        m = _LAST_RUNTIME_RE.match(text)
        if m:
            count, runtime = int(m.group(1)), self._runtime(m.group(2), token)
            return False, lambda r: {v.target for v in runtime.newest(count)}

        m = _RANGE_RE.match(text)
        if m:
            runtime, op = self._runtime(m.group(1), token), _OPS[m.group(2)]
            bound = parse_version(m.group(3))
            return False, lambda r: {
                v.target for v in runtime.versions if op(parse_version(v.version), bound)
            }

        m = _EXACT_RE.match(text)
        if m:
            runtime, wanted = self._runtime(m.group(1), token), parse_version(m.group(2))
            matches = {v.target for v in runtime.versions if parse_version(v.version) == wanted}
            if not matches:
                raise MalformedTarget(token, f"unknown version of {runtime.name}")
            return False, lambda r: matches

        raise MalformedTarget(token, "unrecognized target query")

    def _runtime(self, name: str, token: str):
        runtime = self.catalog.get(name)
        if runtime is None:
            raise MalformedTarget(token, f"unknown runtime '{name}'")
        return runtime

    def _dead(self) -> Set[SupportTarget]:
        return {
            v.target
            for rt in self.catalog.runtimes()
            if self.catalog.is_dead(rt, self.dead_after_months)
            for v in rt.versions
        }


def resolve(
    query: Optional[str],
    catalog: Optional[RuntimeCatalog] = None,
    dead_after_months: int = DEFAULT_DEAD_AFTER_MONTHS,
) -> ResolvedTargets:
    """Resolve a target query using the process-wide catalog by default."""
    return TargetResolver(catalog, dead_after_months).resolve(query)
