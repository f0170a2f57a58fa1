"""Localized interface texts, traffic formatting helpers and release checks for a network traffic monitor."""

__version__ = "1.2.0"