"""Calendar event storage, configuration and terminal-rendered views."""

__version__ = "0.1.0"