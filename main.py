import argparse
import os
import sys

from typing import Dict, List, Optional
from codec import HuffmanCodec
from errors import HuffmanError
from frequency import count_frequencies
from huffman import DEFAULT_ARITY, MIN_ARITY
from stats import CompressionStats, compression_stats

PROMPT = "Input: "  #: Prompt shown when no source is given


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Binary and n-ary Huffman coder for text"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    encode = subparsers.add_parser(
        "encode", aliases=["e"],
        help="Show frequencies, codes and the encoded text",
    )
    _add_common_arguments(encode)
    encode.add_argument(
        "-F",
        "--no-frequencies",
        action="store_true",
        help="Do not print the frequency table",
    )
    encode.add_argument(
        "-C",
        "--no-codes",
        action="store_true",
        help="Do not print the code table",
    )

    roundtrip = subparsers.add_parser(
        "roundtrip", aliases=["r"],
        help="Encode, decode and check the result matches the input",
    )
    _add_common_arguments(roundtrip)

    return parser


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    """Add the input source and arity options shared by subcommands.

    :param subparser: Subcommand parser to extend.
    :type subparser: argparse.ArgumentParser
    :returns: None
    :rtype: None
    """
    subparser.add_argument(
        "source",
        nargs="?",
        help="Text to encode, or path to a file holding it "
             "(prompted for when omitted)",
    )
    subparser.add_argument(
        "-n",
        "--arity",
        type=int,
        default=DEFAULT_ARITY,
        help=f"Children per tree node, at least {MIN_ARITY} "
             f"(default: {DEFAULT_ARITY})",
    )


def _read_source(source: Optional[str]) -> str:
    """Resolve the text to work on.

    An existing file path is replaced by the file's contents; anything
    else is used literally. ``None`` asks for the text on the console.

    :param source: Command-line source argument.
    :type source: Optional[str]
    :returns: Text to encode.
    :rtype: str
    :raises OSError: If the file exists but cannot be read.
    """
    if source is None:
        source = input(PROMPT)
    if os.path.isfile(source):
        with open(source, "r", encoding="utf-8") as f:
            return f.read()
    return source


def _fmt_symbol(symbol: str) -> str:
    """Format a symbol so that whitespace and control characters show.

    :param symbol: Symbol to display.
    :type symbol: str
    :returns: Printable representation.
    :rtype: str
    """
    if symbol.isprintable() and not symbol.isspace():
        return symbol
    return repr(symbol)


def _fmt_pct(ratio: float) -> str:
    """Format a ratio as a rounded percentage like ``42%``.

    :param ratio: Fraction, e.g. ``0.42``.
    :type ratio: float
    :returns: Percentage.
    :rtype: str
    """
    return f"{round(ratio * 100)}%"


def format_table(title: str, table: Dict[str, object]) -> List[str]:
    """Render a symbol-keyed table as ``symbol: value`` lines.

    :param title: Heading line.
    :type title: str
    :param table: Mapping to render, in its own iteration order.
    :type table: Dict[str, object]
    :returns: Lines without trailing newlines.
    :rtype: List[str]
    """
    lines = [title]
    for symbol, value in table.items():
        lines.append(f"{_fmt_symbol(symbol)}: {value}")
    return lines


def format_stats(stats: CompressionStats, arity: int) -> str:
    """Render the statistics summary line.

    :param stats: Figures to report.
    :type stats: CompressionStats
    :param arity: Code arity, used for the digit unit name.
    :type arity: int
    :returns: One line.
    :rtype: str
    """
    unit = "bits" if arity == 2 else f"base-{arity} digits"
    return (
        f"Encoded length: {stats.encoded_digits} {unit} "
        f"({stats.encoded_bits:.1f} bits), "
        f"plain text: {stats.plain_bits} bits, "
        f"saved: {_fmt_pct(stats.saved_ratio)}, "
        f"average code length: {stats.average_code_length:.3f} "
        f"(entropy {stats.entropy:.3f})"
    )


def run_encode(
    text: str, arity: int, show_frequencies: bool = True,
    show_codes: bool = True,
) -> str:
    """Build a code for ``text`` and print the full report.

    :param text: Text to encode.
    :type text: str
    :param arity: Tree arity.
    :type arity: int
    :param show_frequencies: Whether to print the frequency table.
    :type show_frequencies: bool
    :param show_codes: Whether to print the code table.
    :type show_codes: bool
    :returns: The encoded digit string.
    :rtype: str
    :raises HuffmanError: If the code cannot be built.
    """
    codec = HuffmanCodec.from_text(text, arity)
    encoded = codec.encode(text)

    print("Plain text:", text)
    if show_frequencies:
        print()
        print("\n".join(format_table("Frequencies:", count_frequencies(text))))
    if show_codes:
        print()
        print("\n".join(format_table("Codes:", codec.codes)))
    print()
    print("Encoded text:", encoded)
    print()
    print(format_stats(compression_stats(text, encoded, arity, codec.codes),
                       arity))
    return encoded


def run_roundtrip(text: str, arity: int) -> bool:
    """Encode and decode ``text`` and report whether it survived.

    :param text: Text to check.
    :type text: str
    :param arity: Tree arity.
    :type arity: int
    :returns: ``True`` if the decoded text equals ``text``.
    :rtype: bool
    :raises HuffmanError: If the code cannot be built.
    """
    codec = HuffmanCodec.from_text(text, arity)
    encoded = codec.encode(text)
    decoded = codec.decode(encoded)
    ok = decoded == text
    status = "OK" if ok else "MISMATCH"
    print(f"Round trip ({arity}-ary, {len(encoded)} digits): {status}")
    return ok


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        text = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[!] Cannot read input file: {e}")
        return 1
    except EOFError:
        print("[!] No input given")
        return 1

    try:
        if args.cmd in ["encode", "e"]:
            run_encode(
                text,
                args.arity,
                show_frequencies=not args.no_frequencies,
                show_codes=not args.no_codes,
            )
        elif args.cmd in ["roundtrip", "r"]:
            if not run_roundtrip(text, args.arity):
                return 1
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
