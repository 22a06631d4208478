"""Shared user domain: models, store and request engines."""
