"""
Utility functions module.

Shared helpers for timestamps attached to step updates.
"""
