# mentora/__init__.py
"""Mentora: mentorship matching API."""

__version__ = "0.1.0"
