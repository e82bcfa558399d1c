import heapq
from typing import Dict, Iterator, List, Optional, Tuple

from errors import EmptyInput, InvalidArity

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"  #: Code digits for child 0..35
WIDE_DIGIT_BASE = 0x100  #: Child ``i >= 36`` is written as ``chr(0x100 + i)``
MIN_ARITY = 2  #: Smallest tree arity (classic binary Huffman)
DEFAULT_ARITY = 2


def digit(index: int) -> str:
    """Code character for the child at ``index``.

    :param index: Child index, ``0`` for the first child.
    :type index: int
    :returns: ``DIGITS[index]`` for the first 36 children, a character
        from ``U+0124`` upwards for the rest.
    :rtype: str
    """
    if index < len(DIGITS):
        return DIGITS[index]
    return chr(WIDE_DIGIT_BASE + index)


def digit_value(char: str) -> Optional[int]:
    """Child index written by ``char``; the inverse of :func:`digit`.

    :param char: One code character.
    :type char: str
    :returns: The index, or ``None`` if ``char`` is not a code digit.
    :rtype: Optional[int]
    """
    if len(char) != 1:
        return None
    if char in DIGITS:
        return DIGITS.index(char)
    index = ord(char) - WIDE_DIGIT_BASE
    if index >= len(DIGITS):
        return index
    return None


class HuffmanNode:
    """Common base of the three node kinds of an n-ary Huffman tree.

    :ivar freq: Frequency (weight) of the subtree rooted at this node.
    :type freq: int
    """

    def __init__(self, freq: int = 0):
        """Create a node with the given subtree frequency.

        :param int freq: Frequency (weight) associated with this node.
        :returns: None
        :rtype: None
        """
        self.freq = freq

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children.

        :rtype: bool
        """
        return True


class SymbolLeaf(HuffmanNode):
    """Leaf carrying a real input symbol.

    :ivar symbol: The symbol stored at this leaf.
    :type symbol: str
    """

    def __init__(self, symbol: str, freq: int):
        super().__init__(freq)
        self.symbol = symbol

    def __repr__(self):
        return f"SymbolLeaf({self.symbol!r}, {self.freq})"


class DummyLeaf(HuffmanNode):
    """Zero-frequency padding leaf. It never receives a code."""

    def __init__(self):
        super().__init__(0)

    def __repr__(self):
        return "DummyLeaf()"


class InternalNode(HuffmanNode):
    """Internal node owning an ordered list of exactly ``n`` children.

    The child at index ``i`` is reached with code digit ``digit(i)``.

    :ivar children: Ordered child nodes.
    :type children: List[HuffmanNode]
    """

    def __init__(self, children: List[HuffmanNode]):
        super().__init__(sum(child.freq for child in children))
        self.children = children

    @property
    def is_leaf(self) -> bool:
        return False

    def __repr__(self):
        return f"InternalNode({self.freq}, {len(self.children)} children)"


def validate_arity(arity) -> int:
    """Check that ``arity`` can be used to build a tree.

    :param arity: Requested number of children per internal node.
    :type arity: int
    :returns: ``arity`` unchanged.
    :rtype: int
    :raises InvalidArity: If ``arity`` is not an integer of at least
        ``MIN_ARITY``.
    """
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise InvalidArity(arity, MIN_ARITY)
    if arity < MIN_ARITY:
        raise InvalidArity(arity, MIN_ARITY)
    return arity


def padding_size(num_symbols: int, arity: int) -> int:
    """Number of dummy leaves needed so that merging ``arity`` nodes at a
    time ends with exactly one root.

    Every merge removes ``arity - 1`` nodes, so the leaf count minus one
    must be divisible by ``arity - 1``.

    :param num_symbols: Number of distinct real symbols.
    :type num_symbols: int
    :param arity: Tree arity.
    :type arity: int
    :returns: Dummy leaf count in ``0..arity-2``.
    :rtype: int
    """
    if num_symbols <= 1:
        return 0
    return (arity - 1 - (num_symbols - 1) % (arity - 1)) % (arity - 1)


def build_tree(frequencies: Dict[str, int], arity: int) -> HuffmanNode:
    """Build an n-ary Huffman tree from a symbol frequency table.

    Nodes are kept in a min-heap ordered by ``(freq, sequence)``; the
    sequence number is the insertion order (symbols in table order, then
    dummy leaves, then parents as they are created), which makes ties
    resolve the same way on every run.

    :param frequencies: Mapping from symbol to observed frequency.
    :type frequencies: Dict[str, int]
    :param arity: Number of children per internal node.
    :type arity: int
    :returns: Root of the tree. A lone ``SymbolLeaf`` if the table holds
        a single symbol.
    :rtype: HuffmanNode
    :raises InvalidArity: If ``arity`` is below ``MIN_ARITY``.
    :raises EmptyInput: If ``frequencies`` is empty.
    """
    validate_arity(arity)
    if not frequencies:
        raise EmptyInput()

    leaves: List[HuffmanNode] = [
        SymbolLeaf(symbol, freq) for symbol, freq in frequencies.items()
    ]
    if len(leaves) == 1:
        return leaves[0]

    leaves.extend(DummyLeaf() for _ in range(padding_size(len(leaves), arity)))

    heap: List[Tuple[int, int, HuffmanNode]] = [
        (node.freq, seq, node) for seq, node in enumerate(leaves)
    ]
    heapq.heapify(heap)
    seq = len(heap)

    while len(heap) > 1:
        children = [heapq.heappop(heap)[2] for _ in range(arity)]
        parent = InternalNode(children)
        heapq.heappush(heap, (parent.freq, seq, parent))
        seq += 1

    return heap[0][2]


def generate_codes(root: HuffmanNode) -> Dict[str, str]:
    """Assign a code to every real symbol of the tree.

    :param root: Root of a tree produced by :func:`build_tree`.
    :type root: HuffmanNode
    :returns: Mapping from symbol to its digit string. A lone root leaf
        gets the code ``"0"``.
    :rtype: Dict[str, str]
    """
    codes: Dict[str, str] = {}
    _assign_codes(root, "", codes)
    return codes


def _assign_codes(node: HuffmanNode, code: str, codes: Dict[str, str]):
    """Populate ``codes`` by a depth-first walk below ``node``.

    :param node: Current node.
    :type node: HuffmanNode
    :param code: Digits on the path from the root to ``node``.
    :type code: str
    :param codes: Table being filled.
    :type codes: Dict[str, str]
    :returns: None
    :rtype: None
    """
    if isinstance(node, InternalNode):
        for index, child in enumerate(node.children):
            _assign_codes(child, code + digit(index), codes)
    elif isinstance(node, SymbolLeaf):
        codes[node.symbol] = code or "0"


def iter_leaves(root: HuffmanNode) -> Iterator[Tuple[HuffmanNode, str]]:
    """Yield every leaf (dummies included) with its path from the root.

    Leaves come out in depth-first, lowest-digit-first order.

    :param root: Tree root.
    :type root: HuffmanNode
    :returns: Iterator of ``(leaf, code)`` pairs.
    :rtype: Iterator[Tuple[HuffmanNode, str]]
    """
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if isinstance(node, InternalNode):
            for index in range(len(node.children) - 1, -1, -1):
                stack.append((node.children[index], code + digit(index)))
        else:
            yield node, code


def count_leaves(root: HuffmanNode) -> Tuple[int, int]:
    """Count real and dummy leaves of a tree.

    :param root: Tree root.
    :type root: HuffmanNode
    :returns: Tuple ``(real, dummy)``.
    :rtype: Tuple[int, int]
    """
    real = dummy = 0
    for leaf, _ in iter_leaves(root):
        if isinstance(leaf, DummyLeaf):
            dummy += 1
        else:
            real += 1
    return real, dummy


def tree_arity(root: HuffmanNode) -> int:
    """Arity of a built tree, read from the root's child count.

    A single-leaf tree reports ``MIN_ARITY``; only the digit ``0`` is
    meaningful for it.

    :param root: Tree root.
    :type root: HuffmanNode
    :rtype: int
    """
    if isinstance(root, InternalNode):
        return len(root.children)
    return MIN_ARITY
