# src/__init__.py — v1
"""xlhover: element screenshot previews for selector variables."""

from xlhover.version import __version__

__all__ = ["__version__"]
