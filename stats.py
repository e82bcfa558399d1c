import math
from dataclasses import dataclass
from typing import Dict

from frequency import count_frequencies


@dataclass(frozen=True)
class CompressionStats:
    """Size figures for one encoded text.

    ``encoded_bits`` weighs each code digit by ``log2(arity)``, so codes of
    different arities compare on the same scale as ``plain_bits`` (UTF-8
    size of the text in bits).
    """

    symbol_count: int
    encoded_digits: int
    encoded_bits: float
    plain_bits: int
    saved_ratio: float
    average_code_length: float
    entropy: float


def entropy(frequencies: Dict[str, int], base: int = 2) -> float:
    """Shannon entropy of a frequency table, in digits of ``base``.

    This is the lower bound on the average code length of any prefix code
    with ``base`` digits.

    :param frequencies: Mapping from symbol to count.
    :type frequencies: Dict[str, int]
    :param base: Logarithm base (the code arity).
    :type base: int
    :returns: Entropy per symbol; ``0.0`` for empty or single-symbol tables.
    :rtype: float
    """
    total = sum(frequencies.values())
    if total == 0:
        return 0.0
    result = 0.0
    for count in frequencies.values():
        if count:
            p = count / total
            result -= p * math.log(p, base)
    return max(result, 0.0)


def compression_stats(
    text: str, encoded: str, arity: int, codes: Dict[str, str]
) -> CompressionStats:
    """Compute size statistics for ``encoded``, the encoding of ``text``.

    :param text: Plain text.
    :type text: str
    :param encoded: Digit string produced for ``text``.
    :type encoded: str
    :param arity: Arity of the code.
    :type arity: int
    :param codes: Code table used for encoding.
    :type codes: Dict[str, str]
    :returns: Collected figures.
    :rtype: CompressionStats
    """
    frequencies = count_frequencies(text)
    symbol_count = len(text)
    encoded_bits = len(encoded) * math.log2(arity)
    plain_bits = len(text.encode("utf-8")) * 8

    saved_ratio = 0.0
    if plain_bits:
        saved_ratio = (plain_bits - encoded_bits) / plain_bits

    average = 0.0
    if symbol_count:
        average = sum(
            len(codes[symbol]) * count for symbol, count in frequencies.items()
        ) / symbol_count

    return CompressionStats(
        symbol_count=symbol_count,
        encoded_digits=len(encoded),
        encoded_bits=encoded_bits,
        plain_bits=plain_bits,
        saved_ratio=saved_ratio,
        average_code_length=average,
        entropy=entropy(frequencies, arity),
    )
