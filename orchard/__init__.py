"""Orchard: owned resources behind bearer-token authentication."""

__version__ = "0.1.0"
