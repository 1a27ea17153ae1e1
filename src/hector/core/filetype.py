"""
File type detection and the syntax rules attached to each type.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Final, Optional, Tuple

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightingOptions:
    """Syntax rules a highlighter applies to a row."""
    numbers: bool = False
    strings: bool = False
    characters: bool = False
    comment: Optional[str] = None
    multiline_comment: Optional[Tuple[str, str]] = None
    primary_keywords: Tuple[str, ...] = ()
    secondary_keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FileType:
    """A named file type and its highlighting options."""
    name: str
    options: HighlightingOptions

    @classmethod
    def default(cls) -> 'FileType':
        return cls(DEFAULT_FILE_TYPE_NAME, HighlightingOptions())

    @classmethod
    def from_path(cls, path: Optional[str]) -> 'FileType':
        """
        Detect the file type of a path.

        Known extensions map to their rule set. Anything else is named by
        Pygments when it recognizes the file, with numbers and strings
        highlighted, and falls back to the plain default otherwise.

        Args:
            path: File path or name, may be None

        Returns:
            The detected FileType
        """

        if not path:
            return cls.default()

        extension = os.path.splitext(path)[1].lower()
        if extension in FILE_TYPES:
            return FILE_TYPES[extension]

        try:
            lexer = get_lexer_for_filename(path)
        except ClassNotFound:
            logger.debug("No file type for %s", path)
            return cls.default()

        return cls(lexer.name, GENERIC_OPTIONS)


DEFAULT_FILE_TYPE_NAME: Final[str] = 'No filetype'

GENERIC_OPTIONS: Final[HighlightingOptions] = HighlightingOptions(
    numbers=True,
    strings=True,
)

RUST: Final[FileType] = FileType('Rust', HighlightingOptions(
    numbers=True,
    strings=True,
    characters=True,
    comment='//',
    multiline_comment=('/*', '*/'),
    primary_keywords=(
        'as', 'break', 'const', 'continue', 'crate', 'else', 'enum',
        'extern', 'false', 'fn', 'for', 'if', 'impl', 'in', 'let', 'loop',
        'match', 'mod', 'move', 'mut', 'pub', 'ref', 'return', 'self',
        'Self', 'static', 'struct', 'super', 'trait', 'true', 'type',
        'unsafe', 'use', 'where', 'while', 'dyn', 'async', 'await',
    ),
    secondary_keywords=(
        'bool', 'char', 'i8', 'i16', 'i32', 'i64', 'i128', 'isize', 'u8',
        'u16', 'u32', 'u64', 'u128', 'usize', 'f32', 'f64', 'str',
        'String', 'Vec', 'Option', 'Result', 'Some', 'None', 'Ok', 'Err',
    ),
))

PYTHON: Final[FileType] = FileType('Python', HighlightingOptions(
    numbers=True,
    strings=True,
    comment='#',
    primary_keywords=(
        'False', 'None', 'True', 'and', 'as', 'assert', 'async', 'await',
        'break', 'class', 'continue', 'def', 'del', 'elif', 'else',
        'except', 'finally', 'for', 'from', 'global', 'if', 'import', 'in',
        'is', 'lambda', 'nonlocal', 'not', 'or', 'pass', 'raise', 'return',
        'try', 'while', 'with', 'yield',
    ),
    secondary_keywords=(
        'bool', 'bytes', 'dict', 'float', 'int', 'list', 'object', 'self',
        'set', 'str', 'tuple',
    ),
))

C_KEYWORDS: Final[Tuple[str, ...]] = (
    'break', 'case', 'const', 'continue', 'default', 'do', 'else', 'enum',
    'extern', 'for', 'goto', 'if', 'register', 'return', 'sizeof',
    'static', 'struct', 'switch', 'typedef', 'union', 'volatile', 'while',
)

C_TYPES: Final[Tuple[str, ...]] = (
    'char', 'double', 'float', 'int', 'long', 'short', 'signed',
    'unsigned', 'void', 'size_t',
)

C: Final[FileType] = FileType('C', HighlightingOptions(
    numbers=True,
    strings=True,
    characters=True,
    comment='//',
    multiline_comment=('/*', '*/'),
    primary_keywords=C_KEYWORDS,
    secondary_keywords=C_TYPES,
))

CPP: Final[FileType] = FileType('C++', HighlightingOptions(
    numbers=True,
    strings=True,
    characters=True,
    comment='//',
    multiline_comment=('/*', '*/'),
    primary_keywords=C_KEYWORDS + (
        'class', 'delete', 'namespace', 'new', 'private', 'protected',
        'public', 'template', 'this', 'throw', 'try', 'catch', 'using',
        'virtual',
    ),
    secondary_keywords=C_TYPES + ('bool', 'auto'),
))

JAVASCRIPT: Final[FileType] = FileType('JavaScript', HighlightingOptions(
    numbers=True,
    strings=True,
    characters=True,
    comment='//',
    multiline_comment=('/*', '*/'),
    primary_keywords=(
        'async', 'await', 'break', 'case', 'catch', 'class', 'const',
        'continue', 'default', 'delete', 'do', 'else', 'export', 'extends',
        'finally', 'for', 'function', 'if', 'import', 'in', 'instanceof',
        'let', 'new', 'return', 'switch', 'this', 'throw', 'try', 'typeof',
        'var', 'while', 'yield',
    ),
    secondary_keywords=('true', 'false', 'null', 'undefined'),
))

GO: Final[FileType] = FileType('Go', HighlightingOptions(
    numbers=True,
    strings=True,
    characters=True,
    comment='//',
    multiline_comment=('/*', '*/'),
    primary_keywords=(
        'break', 'case', 'chan', 'const', 'continue', 'default', 'defer',
        'else', 'fallthrough', 'for', 'func', 'go', 'goto', 'if', 'import',
        'interface', 'map', 'package', 'range', 'return', 'select',
        'struct', 'switch', 'type', 'var',
    ),
    secondary_keywords=(
        'bool', 'byte', 'error', 'float32', 'float64', 'int', 'int64',
        'rune', 'string', 'uint', 'nil', 'true', 'false',
    ),
))

SHELL: Final[FileType] = FileType('Shell', HighlightingOptions(
    numbers=True,
    strings=True,
    comment='#',
    primary_keywords=(
        'case', 'do', 'done', 'elif', 'else', 'esac', 'fi', 'for',
        'function', 'if', 'in', 'then', 'until', 'while',
    ),
    secondary_keywords=('echo', 'export', 'local', 'return', 'exit'),
))

FILE_TYPES: Final[Dict[str, FileType]] = {
    '.rs': RUST,
    '.py': PYTHON,
    '.pyi': PYTHON,
    '.c': C,
    '.h': C,
    '.cc': CPP,
    '.cpp': CPP,
    '.cxx': CPP,
    '.hpp': CPP,
    '.js': JAVASCRIPT,
    '.mjs': JAVASCRIPT,
    '.go': GO,
    '.sh': SHELL,
    '.bash': SHELL,
}
