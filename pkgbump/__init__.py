"""Bump package versions with cargo-release, one package directory at a time."""

__version__ = "0.1.0"
