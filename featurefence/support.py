"""
Support targets, support matrices and runtime version parsing.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple

_VERSION_RE = re.compile(r"^\d+(?:\.\d+)*$")


def parse_version(version: str) -> Tuple[int, ...]:
    """Parse a dotted runtime version ("15.4", "120") into a comparable tuple.

    Trailing zero components are dropped so that "16" and "16.0" compare equal.

    Raises:
        ValueError: If the version is not purely numeric and dotted
    """
    if version is None:
        raise ValueError("Version string cannot be empty")
    version = str(version).strip()
    if not _VERSION_RE.match(version):
        raise ValueError(f"Invalid runtime version: '{version}'")
    parts = [int(p) for p in version.split(".")]
    while len(parts) > 1 and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


@dataclass(frozen=True, order=True)
class SupportTarget:
    """One (runtime, minimum version) pair."""
    runtime: str
    version: str

    @property
    def version_key(self) -> Tuple[int, ...]:
        return parse_version(self.version)

    def __str__(self) -> str:
        return f"{self.runtime} {self.version}"


class SupportMatrix(Mapping):
    """Resolved set of support targets, one entry per runtime.

    Built from any iterable of SupportTarget; when a runtime appears more
    than once the lowest version wins. Read-only after construction.
    """

    __slots__ = ("_targets",)

    def __init__(self, targets: Iterable[SupportTarget] = ()):
        lowest: Dict[str, SupportTarget] = {}
        for target in targets:
            current = lowest.get(target.runtime)
            if current is None or target.version_key < current.version_key:
                lowest[target.runtime] = target
        ordered = {name: lowest[name] for name in sorted(lowest)}
        self._targets = MappingProxyType(ordered)

    def __getitem__(self, runtime: str) -> SupportTarget:
        return self._targets[runtime]

    def __iter__(self) -> Iterator[str]:
        return iter(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SupportMatrix):
            return dict(self._targets) == dict(other._targets)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._targets.values()))

    def __repr__(self) -> str:
        inner = ", ".join(str(t) for t in self._targets.values())
        return f"SupportMatrix({inner})"

    def targets(self) -> Tuple[SupportTarget, ...]:
        """All targets, ordered by runtime name."""
        return tuple(self._targets.values())

    def to_dict(self) -> Dict[str, str]:
        return {name: t.version for name, t in self._targets.items()}
