"""Interactive in-memory task tracker (console menu over a sorted task store)."""

__version__ = "0.1.0"
