"""Outlook REST API mail adapter."""

__version__ = "0.1.0"
