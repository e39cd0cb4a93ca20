"""Standalone demos of language basics, data structures, algorithms and design patterns."""

__version__ = "0.1.0"
