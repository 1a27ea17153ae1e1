"""
Cursor addressing types shared by rows and documents.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A grapheme column (x) within a row index (y), both zero-based."""
    x: int = 0
    y: int = 0


class SearchDirection(Enum):
    """Scan order for find operations."""
    FORWARD = 'forward'
    BACKWARD = 'backward'
