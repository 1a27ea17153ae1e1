"""
Utility package for grapheme cluster support functions.
"""

from .graphemes import (
    split_graphemes,
    count_graphemes,
    partition,
    grapheme_offsets,
    offset_to_index
)

__all__ = [
    'split_graphemes',
    'count_graphemes',
    'partition',
    'grapheme_offsets',
    'offset_to_index'
]
