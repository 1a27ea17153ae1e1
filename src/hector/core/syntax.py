"""
Syntax highlighting module producing one annotation per grapheme.
"""

import string
from enum import Enum
from typing import Dict, Final, FrozenSet, List, Optional, Sequence, Tuple

from .filetype import HighlightingOptions
from ..utils.graphemes import split_graphemes

FG_RESET: Final[str] = '\x1b[39m'

SEPARATORS: Final[FrozenSet[str]] = frozenset(string.punctuation) - {'_'}


class HighlightType(Enum):
    """Display class of a single grapheme."""
    NONE = 'none'
    NUMBER = 'number'
    MATCH = 'match'
    STRING = 'string'
    CHARACTER = 'character'
    COMMENT = 'comment'
    MULTILINE_COMMENT = 'multiline_comment'
    PRIMARY_KEYWORDS = 'primary_keywords'
    SECONDARY_KEYWORDS = 'secondary_keywords'

    def to_color(self) -> Tuple[int, int, int]:
        return SYNTAX_COLORS[self]


SYNTAX_COLORS: Final[Dict[HighlightType, Tuple[int, int, int]]] = {
    HighlightType.NONE: (255, 255, 255),
    HighlightType.NUMBER: (220, 163, 163),
    HighlightType.MATCH: (38, 139, 210),
    HighlightType.STRING: (211, 54, 130),
    HighlightType.CHARACTER: (108, 113, 196),
    HighlightType.COMMENT: (133, 153, 0),
    HighlightType.MULTILINE_COMMENT: (133, 153, 0),
    HighlightType.PRIMARY_KEYWORDS: (181, 137, 0),
    HighlightType.SECONDARY_KEYWORDS: (42, 161, 152),
}


def fg(color: Tuple[int, int, int]) -> str:
    """Escape sequence switching the foreground to a 24-bit colour."""

    red, green, blue = color
    return f'\x1b[38;2;{red};{green};{blue}m'


def is_separator(cluster: str) -> bool:
    return cluster.isspace() or cluster in SEPARATORS


def highlight(text: str, options: HighlightingOptions,
              word: Optional[str] = None) -> List[HighlightType]:
    """
    Annotate every grapheme of a row.

    Occurrences of the search word are marked first and are never
    overwritten. The remaining graphemes go through the rules enabled in
    options, left to right: multiline comment, comment, string, character
    literal, keywords, numbers.

    Args:
        text: The row text
        options: Rules for the row's file type
        word: Optional live search term

    Returns:
        A list of HighlightType, one per grapheme of text
    """

    graphemes = split_graphemes(text)
    result = [HighlightType.NONE] * len(graphemes)

    if word:
        _mark_matches(graphemes, split_graphemes(word), result)

    rules = (
        _highlight_multiline_comment,
        _highlight_comment,
        _highlight_string,
        _highlight_character,
        _highlight_keywords,
        _highlight_number,
    )

    index = 0
    while index < len(graphemes):
        if result[index] is HighlightType.MATCH:
            index += 1
            continue

        for rule in rules:
            consumed = rule(graphemes, index, options, result)
            if consumed:
                index += consumed
                break
        else:
            index += 1

    return result


def colorize(graphemes: Sequence[str], annotations: Sequence[HighlightType]) -> str:
    """
    Render graphemes with the colour of their annotation.

    Tabs are shown as a single space. The colour escape is only emitted
    when the annotation changes.

    Args:
        graphemes: The clusters to render
        annotations: One HighlightType per cluster

    Returns:
        A printable string ending with a colour reset
    """

    parts = []
    current = None

    for cluster, kind in zip(graphemes, annotations):
        if kind is not current:
            parts.append(fg(kind.to_color()))
            current = kind

        parts.append(' ' if cluster == '\t' else cluster)

    parts.append(FG_RESET)
    return ''.join(parts)


def _starts_with(graphemes: List[str], index: int, token: str) -> int:
    token_graphemes = split_graphemes(token)
    end = index + len(token_graphemes)

    if token_graphemes and graphemes[index:end] == token_graphemes:
        return len(token_graphemes)

    return 0


def _fill(result: List[HighlightType], start: int, end: int, kind: HighlightType) -> None:
    for index in range(start, end):
        if result[index] is not HighlightType.MATCH:
            result[index] = kind


def _mark_matches(graphemes: List[str], word: List[str],
                  result: List[HighlightType]) -> None:
    size = len(word)
    index = 0

    while index + size <= len(graphemes):
        if graphemes[index:index + size] == word:
            _fill(result, index, index + size, HighlightType.MATCH)
            index += size
            continue

        index += 1


def _highlight_multiline_comment(graphemes: List[str], index: int,
                                 options: HighlightingOptions,
                                 result: List[HighlightType]) -> int:
    if not options.multiline_comment:
        return 0

    start, end = options.multiline_comment
    opened = _starts_with(graphemes, index, start)
    if not opened:
        return 0

    stop = len(graphemes)
    cursor = index + opened
    while cursor < len(graphemes):
        closed = _starts_with(graphemes, cursor, end)
        if closed:
            stop = cursor + closed
            break
        cursor += 1

    _fill(result, index, stop, HighlightType.MULTILINE_COMMENT)
    return stop - index


def _highlight_comment(graphemes: List[str], index: int,
                       options: HighlightingOptions,
                       result: List[HighlightType]) -> int:
    if not options.comment or not _starts_with(graphemes, index, options.comment):
        return 0

    _fill(result, index, len(graphemes), HighlightType.COMMENT)
    return len(graphemes) - index


def _highlight_string(graphemes: List[str], index: int,
                      options: HighlightingOptions,
                      result: List[HighlightType]) -> int:
    if not options.strings or graphemes[index] != '"':
        return 0

    cursor = index + 1
    while cursor < len(graphemes):
        if graphemes[cursor] == '\\':
            cursor += 2
            continue

        cursor += 1
        if graphemes[cursor - 1] == '"':
            break

    stop = min(cursor, len(graphemes))
    _fill(result, index, stop, HighlightType.STRING)
    return stop - index


def _highlight_character(graphemes: List[str], index: int,
                         options: HighlightingOptions,
                         result: List[HighlightType]) -> int:
    if not options.characters or graphemes[index] != "'":
        return 0

    size = 0
    if index + 3 < len(graphemes) and graphemes[index + 1] == '\\' \
            and graphemes[index + 3] == "'":
        size = 4
    elif index + 2 < len(graphemes) and graphemes[index + 1] != "'" \
            and graphemes[index + 2] == "'":
        size = 3

    _fill(result, index, index + size, HighlightType.CHARACTER)
    return size


def _highlight_keywords(graphemes: List[str], index: int,
                        options: HighlightingOptions,
                        result: List[HighlightType]) -> int:
    if index > 0 and not is_separator(graphemes[index - 1]):
        return 0

    groups = (
        (options.primary_keywords, HighlightType.PRIMARY_KEYWORDS),
        (options.secondary_keywords, HighlightType.SECONDARY_KEYWORDS),
    )

    for keywords, kind in groups:
        for keyword in keywords:
            size = _starts_with(graphemes, index, keyword)
            if not size:
                continue

            end = index + size
            if end < len(graphemes) and not is_separator(graphemes[end]):
                continue

            _fill(result, index, end, kind)
            return size

    return 0


def _highlight_number(graphemes: List[str], index: int,
                      options: HighlightingOptions,
                      result: List[HighlightType]) -> int:
    if not options.numbers:
        return 0

    cluster = graphemes[index]
    previous = result[index - 1] if index > 0 else None
    follows_number = previous is HighlightType.NUMBER

    if cluster in string.digits:
        if index == 0 or follows_number or is_separator(graphemes[index - 1]):
            result[index] = HighlightType.NUMBER
            return 1
    elif cluster == '.' and follows_number:
        result[index] = HighlightType.NUMBER
        return 1

    return 0
