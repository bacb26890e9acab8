"""Passgate - a minimal authentication service."""

__version__ = "1.0.0"
