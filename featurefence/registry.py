"""
Language analyzer registry.

Maps language names (and aliases) to analyzer factories. Adding a language
means registering a factory here, not touching the gateway.
"""

from functools import partial
from typing import Callable, Dict, List, Optional

from .analyzer_base import BaseAnalyzer
from .analyzers import JavaScriptAnalyzer
from .compat_index import CompatibilityIndex, load_default_index
from .finding import Finding, Position, Severity

UNSUPPORTED_LANGUAGE_RULE = "unsupported-language"

AnalyzerFactory = Callable[[], BaseAnalyzer]


class AnalyzerRegistry:
    """Language -> analyzer lookup. Read-only once the app has started."""

    def __init__(self):
        self._factories: Dict[str, AnalyzerFactory] = {}
        self._primary: List[str] = []

    def register(self, language: str, factory: AnalyzerFactory, aliases=()):
        key = language.lower().strip()
        if key in self._factories:
            raise ValueError(f"Language already registered: {language}")
        self._factories[key] = factory
        self._primary.append(key)
        for alias in aliases:
            self._factories.setdefault(alias.lower().strip(), factory)

    def get(self, language: str) -> Optional[BaseAnalyzer]:
        """A fresh analyzer for ``language``, or None when unsupported."""
        factory = self._factories.get((language or "").lower().strip())
        return factory() if factory is not None else None

    def supported_languages(self) -> List[str]:
        return list(self._primary)

    def __contains__(self, language: str) -> bool:
        return (language or "").lower().strip() in self._factories


def unsupported_language_finding(language: str, supported: List[str]) -> Finding:
    """The single warning returned for a language with no analyzer."""
    names = ", ".join(f"'{s}'" for s in supported) or "none"
    return Finding(
        UNSUPPORTED_LANGUAGE_RULE,
        f"Language '{language}' is not yet supported by this server. "
        f"Only {names} is currently analyzed.",
        Severity.WARN,
        Position(1, 1),
    )


def build_default_registry(index: Optional[CompatibilityIndex] = None) -> AnalyzerRegistry:
    """Registry with every built-in analyzer."""
    index = index if index is not None else load_default_index()
    registry = AnalyzerRegistry()
    registry.register(
        JavaScriptAnalyzer.language,
        partial(JavaScriptAnalyzer, index),
        JavaScriptAnalyzer.aliases,
    )
    return registry
