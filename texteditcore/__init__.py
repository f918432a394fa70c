"""Cursor, selection, key handling and undo/redo logic for text-editing widgets."""

__version__ = "0.1.0"

__all__ = ["layout", "keys", "undo", "state", "keyinput"]