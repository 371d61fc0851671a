"""
Analyzers package: one analyzer per supported language.
"""

from .javascript_analyzer import JavaScriptAnalyzer, RULE_ID, detect_features

__all__ = [
    'JavaScriptAnalyzer',
    'RULE_ID',
    'detect_features',
]
