"""Everyday helpers: collections, hashing, timeouts, MP4 durations, disk keep-alive and small launchers."""

__version__ = "0.1.0"