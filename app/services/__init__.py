"""Services wrapping the featurefence engine."""

from .linter import LintService

__all__ = ["LintService"]
