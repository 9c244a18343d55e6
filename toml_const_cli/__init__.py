"""
toml-const-cli — bootstrap compile-time TOML constants for Cargo packages.
"""

__version__ = "0.1.0"
