"""
Command-line interface implementation.

Provides the ``fuzzyrank`` command: ranked search over JSON record files,
single-pair classification and edit-distance inspection.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
