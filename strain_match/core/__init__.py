"""
Core domain layer for strain-match.

This package contains pure matching logic with no external dependencies.
All code here should be testable without I/O operations.
"""

from __future__ import annotations

__all__ = []
