"""
Hector - grapheme-aware text buffer engine for terminal editors.
"""

import logging

from .core import (
    Document,
    FileType,
    HighlightType,
    HighlightingOptions,
    Position,
    Row,
    SearchDirection
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'Document',
    'FileType',
    'HighlightType',
    'HighlightingOptions',
    'Position',
    'Row',
    'SearchDirection'
]
