"""Utility functions for cbase32.

This module provides encoded size calculation.
"""

from __future__ import annotations

from .sizing import buffer_len, encoded_len

__all__ = [
    "encoded_len",
    "buffer_len",
]
