"""
Row module holding a single editable line of text.
"""

from typing import List, Optional, Tuple

from .filetype import HighlightingOptions
from .position import SearchDirection
from .syntax import FG_RESET, HighlightType, SYNTAX_COLORS, fg, highlight
from ..utils.graphemes import (
    count_graphemes,
    offset_to_index,
    partition,
    split_graphemes
)

DIGIT_COLOR = fg(SYNTAX_COLORS[HighlightType.NUMBER])


class Row:
    """
    One line of a document, addressed by grapheme cluster.

    The grapheme count is cached and refreshed by every mutating method,
    so length() never walks the text.
    """

    def __init__(self, text: str = '') -> None:
        self._text = text
        self._len = 0
        self._highlighting: List[HighlightType] = []
        self._update_len()

    @classmethod
    def from_str(cls, text: str) -> 'Row':
        return cls(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def highlighting(self) -> Tuple[HighlightType, ...]:
        return tuple(self._highlighting)

    def __len__(self) -> int:
        return self._len

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._text == other._text

    def __repr__(self) -> str:
        return f'Row({self._text!r})'

    def length(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def as_bytes(self) -> bytes:
        return self._text.encode('utf-8')

    def _update_len(self) -> None:
        # annotations describe the old text
        self._highlighting = []
        self._len = count_graphemes(self._text)

    def render(self, start: int, end: int) -> str:
        """
        Build the displayable form of the grapheme range [start, end).

        Tabs show as one space and every ASCII digit is wrapped in its own
        colour-on/colour-off pair.
        """

        end = min(end, self._len)
        start = min(start, end)

        result = []
        for cluster in split_graphemes(self._text)[start:end]:
            if cluster == '\t':
                result.append(' ')
            elif len(cluster) == 1 and cluster.isascii() and cluster.isdigit():
                result.append(f'{DIGIT_COLOR}{cluster}{FG_RESET}')
            else:
                result.append(cluster)

        return ''.join(result)

    def insert(self, at: int, ch: str) -> None:
        """Insert ch before grapheme at, or append when at is past the end."""

        if at >= self._len:
            self._text += ch
        else:
            prefix, suffix = partition(self._text, at)
            self._text = prefix + ch + suffix

        self._update_len()

    def delete(self, at: int) -> None:
        """Remove the grapheme at the given index."""

        if at >= self._len:
            return

        graphemes = split_graphemes(self._text)
        del graphemes[at]
        self._text = ''.join(graphemes)
        self._update_len()

    def append(self, other: 'Row') -> None:
        self._text = f'{self._text}{other._text}'
        self._update_len()

    def split(self, at: int) -> 'Row':
        """
        Cut the row at a grapheme boundary.

        This row keeps the clusters before at; the rest is returned as a new
        row. Highlighting on both is dropped until the caller re-highlights.
        """

        prefix, suffix = partition(self._text, at)
        self._text = prefix
        self._update_len()

        return Row(suffix)

    def highlight(self, options: HighlightingOptions, word: Optional[str] = None) -> None:
        self._highlighting = highlight(self._text, options, word)

    def find(self, query: str, at: int, direction: SearchDirection) -> Optional[int]:
        """
        Search the row for a literal substring.

        Args:
            query: Text to look for
            at: Grapheme index the search starts from
            direction: FORWARD scans [at, length()), BACKWARD scans [0, at)

        Returns:
            Grapheme index of the leftmost (forward) or rightmost (backward)
            match, or None
        """

        if at > self._len or not query:
            return None

        if direction is SearchDirection.FORWARD:
            start, end = at, self._len
        else:
            start, end = 0, at

        substring = ''.join(split_graphemes(self._text)[start:end])

        if direction is SearchDirection.FORWARD:
            offset = substring.find(query)
            while offset != -1:
                index = offset_to_index(substring, offset, len(query))
                if index is not None:
                    return start + index
                offset = substring.find(query, offset + 1)
        else:
            offset = substring.rfind(query)
            while offset != -1:
                index = offset_to_index(substring, offset, len(query))
                if index is not None:
                    return start + index
                offset = substring.rfind(query, 0, offset + len(query) - 1)

        return None
