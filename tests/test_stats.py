import math

import pytest

from codec import HuffmanCodec
from stats import compression_stats, entropy


def test_entropy_basic_values():
    assert entropy({}) == 0.0
    assert entropy({"a": 7}) == 0.0
    assert entropy({"a": 1, "b": 1}) == pytest.approx(1.0)
    assert entropy({s: 1 for s in "abc"}, 3) == pytest.approx(1.0)


MULTI_SYMBOL_TEXTS = [
    "ab",
    "aabbc",
    "abracadabra",
    "Hello World!\n",
    "the quick brown fox jumps over the lazy dog",
    "Kodierter Text: äöü ß €",
    "aaaaaaaaaabbbbbcccdde",
]


@pytest.mark.parametrize("text", MULTI_SYMBOL_TEXTS)
@pytest.mark.parametrize("arity", [2, 3, 4, 8, 40])
def test_average_code_length_is_near_optimal(text, arity):
    codec = HuffmanCodec.from_text(text, arity)
    stats = compression_stats(text, codec.encode(text), arity, codec.codes)
    assert stats.entropy - 1e-9 <= stats.average_code_length
    assert stats.average_code_length < stats.entropy + 1


def test_compression_stats_figures():
    text = "aaaa"
    codec = HuffmanCodec.from_text(text, 3)
    encoded = codec.encode(text)
    stats = compression_stats(text, encoded, 3, codec.codes)
    assert stats.symbol_count == 4
    assert stats.encoded_digits == 4
    assert stats.encoded_bits == pytest.approx(4 * math.log2(3))
    assert stats.plain_bits == 32
    assert stats.saved_ratio == pytest.approx((32 - 4 * math.log2(3)) / 32)
    assert stats.average_code_length == 1.0


def test_plain_bits_count_utf8_bytes():
    text = "äb"
    codec = HuffmanCodec.from_text(text, 2)
    stats = compression_stats(text, codec.encode(text), 2, codec.codes)
    assert stats.plain_bits == 24
    assert stats.encoded_bits == 2.0


def test_empty_text_stats():
    stats = compression_stats("", "", 2, {})
    assert stats.saved_ratio == 0.0
    assert stats.average_code_length == 0.0
    assert stats.entropy == 0.0
