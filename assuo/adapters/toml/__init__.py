"""
TOML adapter
Reads assuo patch files written in TOML
"""

from .importer import TomlImporter

__all__ = ['TomlImporter']
