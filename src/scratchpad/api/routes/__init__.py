"""API route modules."""

from scratchpad.api.routes import folders, health, notes

__all__ = ["folders", "health", "notes"]
