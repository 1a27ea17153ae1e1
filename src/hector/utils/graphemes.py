"""
Utility functions for grapheme cluster operations.
"""

from typing import List, Optional, Tuple

import grapheme


def split_graphemes(text: str) -> List[str]:
    """
    Split a string into its user-perceived characters.

    Args:
        text (str): String to split

    Returns:
        List[str]: One entry per extended grapheme cluster
    """

    return list(grapheme.graphemes(text))


def count_graphemes(text: str) -> int:
    """Count the grapheme clusters in a string."""

    return grapheme.length(text)


def partition(text: str, at: int) -> Tuple[str, str]:
    """
    Partition a string at a grapheme boundary.

    Args:
        text (str): String to partition
        at (int): Number of clusters that go into the prefix

    Returns:
        Tuple[str, str]: The prefix and the suffix
    """

    prefix: List[str] = []
    suffix: List[str] = []

    for index, cluster in enumerate(grapheme.graphemes(text)):
        if index < at:
            prefix.append(cluster)
        else:
            suffix.append(cluster)

    return ''.join(prefix), ''.join(suffix)


def grapheme_offsets(text: str) -> List[int]:
    """
    Get the code point offset at which each grapheme cluster starts.

    Args:
        text (str): String to analyze

    Returns:
        List[int]: Start offsets, one per cluster
    """

    offsets = []
    offset = 0

    for size in grapheme.grapheme_lengths(text):
        offsets.append(offset)
        offset += size

    return offsets


def offset_to_index(text: str, offset: int, size: int = 0) -> Optional[int]:
    """
    Map a code point offset back to a grapheme index.

    Args:
        text (str): String the offset points into
        offset (int): Code point offset, usually a str.find() result
        size (int): Length of the match at offset; its end must also fall
                    on a cluster boundary

    Returns:
        int: Index of the cluster starting at offset, or None when either
             end of the match falls inside a cluster
    """

    offsets = grapheme_offsets(text)
    boundaries = set(offsets)
    boundaries.add(len(text))

    if offset not in boundaries or offset + size not in boundaries:
        return None

    if offset == len(text):
        return None

    return offsets.index(offset)
