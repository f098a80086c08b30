"""Puppy care management backend: domain core, use-cases and adapters."""

__version__ = "0.1.0"
