from typing import Dict, Iterable, Iterator, Tuple

from errors import InvalidEncoding, UnknownSymbol
from frequency import count_frequencies
from huffman import (
    DEFAULT_ARITY,
    DIGITS,
    DummyLeaf,
    HuffmanNode,
    SymbolLeaf,
    build_tree,
    digit_value,
    generate_codes,
    tree_arity,
)


def _iter_codes(text: Iterable[str], table: Dict[str, str]) -> Iterator[str]:
    """Yield the code of each symbol of ``text`` from ``table``.

    :param text: Symbols to encode.
    :type text: Iterable[str]
    :param table: Mapping from symbol to code.
    :type table: Dict[str, str]
    :returns: Iterator over per-symbol codes, in input order.
    :rtype: Iterator[str]
    :raises UnknownSymbol: When a symbol has no code.
    """
    for position, symbol in enumerate(text):
        try:
            yield table[symbol]
        except KeyError:
            raise UnknownSymbol(symbol, position) from None


class HuffmanCodec:
    """Encoder/decoder bound to one n-ary Huffman tree.

    :ivar root: Root of the code tree, used for decoding.
    :type root: HuffmanNode
    :ivar codes: Mapping from symbol to code, used for encoding.
    :type codes: Dict[str, str]
    :ivar arity: Number of children per internal node, read from ``root``.
    :type arity: int
    """

    def __init__(self, root: HuffmanNode, codes: Dict[str, str]):
        """Wrap an already built tree and its code table.

        :param root: Tree root.
        :type root: HuffmanNode
        :param codes: Code table generated from ``root``.
        :type codes: Dict[str, str]
        :returns: None
        :rtype: None
        """
        self.root = root
        self.codes = codes
        self.arity = tree_arity(root)

    @classmethod
    def from_text(cls, text: str, arity: int = DEFAULT_ARITY) -> "HuffmanCodec":
        """Count symbols of ``text`` and build a tree and table for them.

        :param text: Training text; every symbol that will later be
            encoded must occur in it.
        :type text: str
        :param arity: Number of children per internal node.
        :type arity: int
        :returns: A codec ready to encode and decode.
        :rtype: HuffmanCodec
        :raises InvalidArity: If ``arity`` is below ``MIN_ARITY``.
        :raises EmptyInput: If ``text`` is empty.
        """
        root = build_tree(count_frequencies(text), arity)
        return cls(root, generate_codes(root))

    def iter_encode(self, text: Iterable[str]) -> Iterator[str]:
        """Lazily yield the code of each symbol of ``text`` in order.

        :param text: Symbols to encode.
        :type text: Iterable[str]
        :returns: Iterator over per-symbol codes.
        :rtype: Iterator[str]
        :raises UnknownSymbol: When a symbol has no code.
        """
        return _iter_codes(text, self.codes)

    def encode(self, text: Iterable[str]) -> str:
        """Encode ``text`` into one digit string.

        :param text: Symbols to encode.
        :type text: Iterable[str]
        :returns: Concatenated codes.
        :rtype: str
        :raises UnknownSymbol: When a symbol has no code.
        """
        return "".join(_iter_codes(text, self.codes))

    def decode(self, digits: Iterable[str]) -> str:
        """Decode a digit string produced by :meth:`encode`.

        :param digits: Code digits.
        :type digits: Iterable[str]
        :returns: Decoded text.
        :rtype: str
        :raises InvalidEncoding: If a digit is not valid for the tree, a
            path ends on a padding leaf, or the stream stops mid-code.
        """
        root = self.root
        if isinstance(root, SymbolLeaf):
            return self._decode_single(digits)

        output = []
        node = root
        position = -1
        for position, digit in enumerate(digits):
            index = digit_value(digit)
            if index is None:
                raise InvalidEncoding(f"Invalid code digit {digit!r}", position)
            # leaves reset the cursor to the root, so node is internal here
            if index >= len(node.children):
                raise InvalidEncoding(
                    f"Digit {digit!r} out of range for arity "
                    f"{len(node.children)}",
                    position,
                )
            node = node.children[index]
            if isinstance(node, SymbolLeaf):
                output.append(node.symbol)
                node = root
            elif isinstance(node, DummyLeaf):
                raise InvalidEncoding("Code leads to a padding leaf", position)

        if node is not root:
            raise InvalidEncoding(
                "Truncated code at end of input", position + 1
            )
        return "".join(output)

    def _decode_single(self, digits: Iterable[str]) -> str:
        """Decode against a tree made of one leaf, whose code is ``"0"``.

        :param digits: Code digits.
        :type digits: Iterable[str]
        :returns: The root symbol repeated once per digit.
        :rtype: str
        :raises InvalidEncoding: On any digit other than ``"0"``.
        """
        count = 0
        for position, digit in enumerate(digits):
            if digit != DIGITS[0]:
                raise InvalidEncoding(
                    f"Digit {digit!r} is not valid for a single-symbol code",
                    position,
                )
            count += 1
        return self.root.symbol * count


def build(
    text: str, arity: int = DEFAULT_ARITY
) -> Tuple[HuffmanNode, Dict[str, str]]:
    """Build a code tree and its code table for ``text``.

    :param text: Training text.
    :type text: str
    :param arity: Number of children per internal node.
    :type arity: int
    :returns: Tuple ``(root, codes)``.
    :rtype: Tuple[HuffmanNode, Dict[str, str]]
    :raises InvalidArity: If ``arity`` is below ``MIN_ARITY``.
    :raises EmptyInput: If ``text`` is empty.
    """
    codec = HuffmanCodec.from_text(text, arity)
    return codec.root, codec.codes


def encode(text: Iterable[str], table: Dict[str, str]) -> str:
    """Encode ``text`` with a code table returned by :func:`build`.

    :raises UnknownSymbol: When a symbol has no code.
    """
    return "".join(_iter_codes(text, table))


def decode(digits: Iterable[str], tree: HuffmanNode) -> str:
    """Decode ``digits`` against a tree returned by :func:`build`.

    :raises InvalidEncoding: If ``digits`` do not match ``tree``.
    """
    return HuffmanCodec(tree, {}).decode(digits)
