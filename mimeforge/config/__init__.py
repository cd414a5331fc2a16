"""Configuration module for mimeforge.

Provides the configuration model and YAML loading for expansion runs.
"""

from mimeforge.config.models import PRIORITY, STACK, STRATEGIES, ExpansionConfig

__all__ = ["ExpansionConfig", "PRIORITY", "STACK", "STRATEGIES"]
