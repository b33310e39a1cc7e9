"""tfchanges command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``tfchanges`` script).
"""

from tfchanges.cli.main import cli

__all__ = ["cli"]
