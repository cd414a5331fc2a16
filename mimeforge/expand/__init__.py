"""Expansion module for mimeforge.

Provides the expansion engine and the converter step combinator.
"""

from mimeforge.config.models import ExpansionConfig
from mimeforge.expand.combine import combine
from mimeforge.expand.engine import ExpansionEngine, expand

__all__ = ["ExpansionConfig", "ExpansionEngine", "combine", "expand"]
