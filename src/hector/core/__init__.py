"""
Core package for the text buffer engine.

This package implements the editing core: the Row class for a single
grapheme-addressed line, the Document class owning the rows of a file, the
file type table and the syntax highlighter producing per-grapheme
annotations for display.
"""

from .position import Position, SearchDirection
from .row import Row
from .document import Document
from .filetype import FileType, HighlightingOptions
from .syntax import HighlightType

__all__ = [
    'Position',
    'SearchDirection',
    'Row',
    'Document',
    'FileType',
    'HighlightingOptions',
    'HighlightType'
]
