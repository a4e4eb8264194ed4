"""
Commands Package

CLI commands organized into focused modules:
- evaluate.py - answer evaluation and keyword preview
- practice.py - interactive practice sessions
- quality.py - blog quality gate
- config.py - configuration management
"""

from .evaluate import evaluate, keywords
from .practice import practice
from .quality import quality_gate
from .config import config

__all__ = [
    'evaluate',
    'keywords',
    'practice',
    'quality_gate',
    'config',
]
