"""ORP (Optimal Recognition Point) calculator for RSVP reading."""

import math
from typing import Tuple


def pivot_index(word: str) -> int:
    """
    Calculate the ORP index for a word.

    The pivot character is held at a fixed screen position so the eye
    does not move between words. Single characters pivot on themselves;
    longer words pivot on the last character of their first half.

    An earlier length-tiered table (fixed pivot 3 above nine characters,
    ``len // 2 - 1`` above five) was never in effect; ``ceil(len / 2) - 1``
    is the observable behavior and is kept as is.

    Args:
        word: The word to calculate the ORP for. Must not be a pause token.

    Returns:
        The 0-indexed position of the pivot character (0 for an empty word).

    Examples:
        >>> pivot_index("I")
        0
        >>> pivot_index("read")
        1
        >>> pivot_index("reading")
        3
    """
    length = len(word)
    if length <= 1:
        return 0
    return math.ceil(length / 2) - 1


def split_for_display(word: str) -> Tuple[str, str, str]:
    """
    Split a word into three parts for ORP display.

    Example:
        >>> split_for_display("reading")
        ('rea', 'd', 'ing')
    """
    if not word:
        return ("", "", "")

    index = pivot_index(word)
    return (word[:index], word[index], word[index + 1:])


class PivotCalculator:
    """
    Calculate the Optimal Recognition Point for displayed words.

    The calculation is a fixed heuristic and does not depend on language;
    the class exists so the reader can hold a configured calculator next to
    its other collaborators.
    """

    def calculate(self, word: str) -> int:
        """Return the pivot index for ``word``."""
        return pivot_index(word)

    def split_for_display(self, word: str) -> Tuple[str, str, str]:
        """
        Split a word into (before_pivot, pivot_char, after_pivot).

        This is useful for UI rendering where the pivot character is
        highlighted differently from the rest of the word.
        """
        return split_for_display(word)
