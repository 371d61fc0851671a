"""
JavaScript checks: platform features unsupported by the requested targets.
"""

import re
from typing import List

from ..analyzer_base import BaseAnalyzer
from ..compat_index import CompatibilityIndex
from ..finding import FeatureUsage, Position
from ..utils import mask_source

RULE_ID = "featurefence/no-unsupported-feature"

# (feature id, pattern). The named group "f" is the reported span.
FEATURE_PATTERNS = (
    ("api.Document.startViewTransition", re.compile(r"\b(?P<f>startViewTransition)\s*\(")),
    ("api.structuredClone", re.compile(r"(?<![\w$])(?P<f>structuredClone)\s*\(")),
    ("javascript.builtins.Array.at", re.compile(r"\.(?P<f>at)\s*\(")),
    ("javascript.builtins.Array.findLast", re.compile(r"\.(?P<f>findLast(?:Index)?)\s*\(")),
    ("javascript.builtins.Array.flat", re.compile(r"\.(?P<f>flat(?:Map)?)\s*\(")),
    ("javascript.builtins.Array.toSorted", re.compile(r"\.(?P<f>toSorted|toReversed|toSpliced)\s*\(")),
    ("javascript.builtins.Object.groupBy", re.compile(r"\b(?P<f>(?:Object|Map)\s*\.\s*groupBy)\s*\(")),
    ("javascript.builtins.Object.hasOwn", re.compile(r"\b(?P<f>Object\s*\.\s*hasOwn)\s*\(")),
    ("javascript.builtins.Promise.any", re.compile(r"\b(?P<f>Promise\s*\.\s*any)\s*\(")),
    ("javascript.builtins.Promise.withResolvers", re.compile(r"\b(?P<f>Promise\s*\.\s*withResolvers)\s*\(")),
    ("javascript.builtins.String.replaceAll", re.compile(r"\.(?P<f>replaceAll)\s*\(")),
    ("javascript.classes.private_class_fields", re.compile(r"(?<![\w$#])(?P<f>#[A-Za-z_$][\w$]*)")),
    ("javascript.classes.static_initialization_blocks", re.compile(r"\b(?P<f>static)\s*\{")),
    ("javascript.operators.logical_assignment", re.compile(r"(?P<f>\|\|=|&&=|\?\?=)")),
    ("javascript.operators.nullish_coalescing", re.compile(r"(?P<f>\?\?)(?!=)")),
    ("javascript.operators.optional_chaining", re.compile(r"(?P<f>\?\.)(?!\d)")),
)


def detect_features(code: str) -> List[FeatureUsage]:
    """Scan source into feature usages, in source order."""
    usages: List[FeatureUsage] = []
    for line_no, line in enumerate(mask_source(code), 1):
        for feature_id, pattern in FEATURE_PATTERNS:
            for m in pattern.finditer(line):
                usages.append(FeatureUsage(
                    feature_id,
                    Position(line_no, m.start("f") + 1, line_no, m.end("f") + 1),
                ))
    usages.sort(key=lambda u: (u.position.line, u.position.column, u.feature_id))
    return usages


class JavaScriptAnalyzer(BaseAnalyzer):
    """Flags JavaScript platform features the target runtimes lack."""

    language = "javascript"
    aliases = ("js", "mjs", "cjs")

    def __init__(self, index: CompatibilityIndex):
        super().__init__()
        self.index = index

    def _run_checks(self):
        """Run JavaScript-specific checks."""
        self._check_unsupported_features()

    def _check_unsupported_features(self):
        for usage in detect_features(self.code):
            if usage.feature_id in self.options.ignore:
                continue
            verdict = self.index.verdict(usage.feature_id, self.options.targets)
            if verdict.supported:
                continue
            info = self.index.feature(usage.feature_id)
            title = info.title if info else usage.feature_id
            lacking = ", ".join(str(t) for t in verdict.unsupported_on)
            pos = usage.position
            self._add_finding(
                RULE_ID,
                f"{title} is not supported in {lacking} ({usage.feature_id})",
                self.options.severity,
                pos.line, pos.column, pos.end_line, pos.end_column,
            )
