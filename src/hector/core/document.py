"""
Document module owning the rows of an open file.
"""

import logging
from typing import List, Optional

from .filetype import FileType
from .position import Position, SearchDirection
from .row import Row

logger = logging.getLogger(__name__)


def split_lines(content: str) -> List[str]:
    """
    Split file content into lines without their terminators.

    Lines end at '\\n'; a '\\r' right before it is dropped too. A final
    terminator does not start another line.
    """

    if not content:
        return []

    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()

    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Document:
    """
    Ordered rows of text plus the file they belong to.

    Rows are only ever addressed by index; insert and delete shift the
    indices of every row after the edit.
    """

    def __init__(self) -> None:
        self._rows: List[Row] = []
        self.file_name: Optional[str] = None
        self._dirty = False
        self._file_type = FileType.default()

    @classmethod
    def open(cls, file_name: str) -> 'Document':
        """
        Load a UTF-8 text file.

        Raises:
            OSError: The file is missing or unreadable
            UnicodeDecodeError: The file is not valid UTF-8
        """

        with open(file_name, 'r', encoding='utf-8', newline='') as f:
            contents = f.read()

        document = cls()
        document.file_name = file_name
        document._file_type = FileType.from_path(file_name)

        options = document._file_type.options
        for line in split_lines(contents):
            row = Row(line)
            row.highlight(options)
            document._rows.append(row)

        logger.info("Opened %s (%d rows, %s)", file_name, len(document._rows),
                    document._file_type.name)

        return document

    def file_type(self) -> str:
        return self._file_type.name

    def row(self, index: int) -> Optional[Row]:
        if not 0 <= index < len(self._rows):
            return None

        return self._rows[index]

    def is_empty(self) -> bool:
        return not self._rows

    def length(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def is_dirty(self) -> bool:
        return self._dirty

    def _insert_newline(self, at: Position) -> None:
        options = self._file_type.options

        if at.y == len(self._rows):
            self._rows.append(Row())
            return

        current_row = self._rows[at.y]
        new_row = current_row.split(at.x)
        current_row.highlight(options)
        new_row.highlight(options)
        self._rows.insert(at.y + 1, new_row)

    def insert(self, at: Position, ch: str) -> None:
        """Insert a character, or split the row when ch is a newline."""

        if at.y > len(self._rows):
            logger.debug("Ignoring insert past the last row at %s", at)
            return

        self._dirty = True

        if ch == '\n':
            self._insert_newline(at)
            return

        options = self._file_type.options
        if at.y == len(self._rows):
            row = Row()
            row.insert(0, ch)
            row.highlight(options)
            self._rows.append(row)
        else:
            row = self._rows[at.y]
            row.insert(at.x, ch)
            row.highlight(options)

    def delete(self, at: Position) -> None:
        """
        Delete the grapheme at a position.

        At the end of any row but the last, the next row is joined onto
        this one instead.
        """

        if at.y >= len(self._rows):
            logger.debug("Ignoring delete past the last row at %s", at)
            return

        self._dirty = True

        row = self._rows[at.y]
        if at.x == row.length() and at.y < len(self._rows) - 1:
            next_row = self._rows.pop(at.y + 1)
            row.append(next_row)
        else:
            row.delete(at.x)

        row.highlight(self._file_type.options)

    def save(self) -> None:
        """
        Write every row followed by a newline to the document's file.

        Does nothing when the document has no file name. I/O errors are
        raised as they happen; rows already written stay written.
        """

        if not self.file_name:
            return

        with open(self.file_name, 'wb') as f:
            self._file_type = FileType.from_path(self.file_name)
            options = self._file_type.options

            for row in self._rows:
                f.write(row.as_bytes())
                f.write(b'\n')
                row.highlight(options)

        self._dirty = False
        logger.info("Saved %s (%d rows)", self.file_name, len(self._rows))

    def highlight(self, word: Optional[str] = None) -> None:
        options = self._file_type.options

        for row in self._rows:
            row.highlight(options, word)

    def find(self, query: str, at: Position, direction: SearchDirection) -> Optional[Position]:
        """
        Find query starting from a position.

        Forward search continues at column 0 of each following row,
        backward search at the end of each preceding row. The scan stops
        at the document boundary without wrapping.

        Returns:
            Position of the match, or None
        """

        if at.y >= len(self._rows):
            return None

        x, y = at.x, at.y

        while 0 <= y < len(self._rows):
            found = self._rows[y].find(query, x, direction)
            if found is not None:
                return Position(found, y)

            if direction is SearchDirection.FORWARD:
                y += 1
                x = 0
            else:
                y -= 1
                if y >= 0:
                    x = self._rows[y].length()

        return None
