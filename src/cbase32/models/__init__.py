"""Pydantic integration for cbase32.

This module provides field types for holding base32-encoded values in
Pydantic models.
"""

from __future__ import annotations

from .fields import Base32Bytes

__all__ = [
    "Base32Bytes",
]
