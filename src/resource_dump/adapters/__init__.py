"""Concrete implementations of application ports."""
