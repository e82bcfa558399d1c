class HuffmanError(ValueError):
    """Base class for every error raised by the coder."""


class EmptyInput(HuffmanError):
    """Raised when a code tree is requested for text without symbols."""

    def __init__(self):
        super().__init__("Cannot build a code tree from empty input")


class InvalidArity(HuffmanError):
    """Raised when the tree arity is not an integer of at least two.

    :ivar arity: The rejected arity value.
    :type arity: object
    """

    def __init__(self, arity, low: int):
        """Create the error for a rejected ``arity``.

        :param arity: The rejected value.
        :type arity: object
        :param low: Smallest supported arity.
        :type low: int
        """
        super().__init__(
            f"Invalid arity {arity!r}: expected an integer >= {low}"
        )
        self.arity = arity


class UnknownSymbol(HuffmanError):
    """Raised when text contains a symbol absent from the code table.

    :ivar symbol: The symbol that has no code.
    :type symbol: str
    :ivar position: Index of the symbol in the encoded text.
    :type position: int
    """

    def __init__(self, symbol: str, position: int):
        super().__init__(
            f"Unknown symbol {symbol!r} at position {position}"
        )
        self.symbol = symbol
        self.position = position


class InvalidEncoding(HuffmanError):
    """Raised when a digit stream does not match the code tree.

    :ivar position: Index of the offending digit, or the stream length
        when the stream ends in the middle of a code.
    :type position: int
    """

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at digit {position})")
        self.position = position
