"""Conversation/messaging backend with pluggable storage and reply generation."""

__version__ = "1.0.0"
