"""Threaded comment core: threads, nested comments, moderation and votes."""

__version__ = "0.1.0"
