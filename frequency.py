from collections import Counter
from typing import Dict, Iterable


def count_frequencies(text: Iterable[str]) -> Dict[str, int]:
    """Count occurrences of each distinct symbol in ``text``.

    Symbols are listed in the order of their first occurrence, so the
    table (and every tree built from it) is the same for the same text.

    :param text: Sequence of symbols (usually a ``str``).
    :type text: Iterable[str]
    :returns: Mapping from symbol to its number of occurrences.
    :rtype: Dict[str, int]
    """
    return dict(Counter(text))
