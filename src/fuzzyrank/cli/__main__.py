"""
CLI entry point for fuzzyrank.

Executed when running ``python -m fuzzyrank.cli``.
"""

from .main import cli

if __name__ == "__main__":
    cli(prog_name="fuzzyrank")
