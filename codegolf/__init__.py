"""Hole test-case generators and site helpers for a code golf puzzle site."""

__version__ = "0.1.0"