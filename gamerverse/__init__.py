"""Gamerverse: personal game library tracker."""

__version__ = "0.1.0"
