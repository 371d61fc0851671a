"""
FeatureFence: dispatch source code to analyzers that flag platform features
unsupported by a browserslist-style compatibility target.
"""

from .compat_index import CompatibilityIndex, load_default_index
from .exceptions import (
    AnalyzerFailure,
    DataLoadError,
    FeatureFenceError,
    InvalidInput,
    MalformedTarget,
    PayloadTooLarge,
)
from .finding import DiagnosticReport, Finding, Position, Severity
from .gateway import LintGateway, LintResult
from .normalizer import normalize
from .registry import AnalyzerRegistry, build_default_registry
from .runtimes import RuntimeCatalog, load_default_catalog
from .support import SupportMatrix, SupportTarget
from .targets import DEFAULT_QUERY, TargetResolver, resolve

__version__ = "0.1.0"

__all__ = [
    "AnalyzerFailure",
    "AnalyzerRegistry",
    "CompatibilityIndex",
    "DEFAULT_QUERY",
    "DataLoadError",
    "DiagnosticReport",
    "FeatureFenceError",
    "Finding",
    "InvalidInput",
    "LintGateway",
    "LintResult",
    "MalformedTarget",
    "PayloadTooLarge",
    "Position",
    "RuntimeCatalog",
    "Severity",
    "SupportMatrix",
    "SupportTarget",
    "TargetResolver",
    "build_default_registry",
    "load_default_catalog",
    "load_default_index",
    "normalize",
    "resolve",
]
