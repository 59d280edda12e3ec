"""
Core domain layer for rosetta-bom.

This package contains pure business logic: identifier extraction and the
vocabulary tokenizer. Nothing here touches the filesystem.
"""

from __future__ import annotations

__all__ = []
