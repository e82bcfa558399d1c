import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

SAMPLE_TEXTS = [
    "a",
    "ab",
    "aabbc",
    "abracadabra",
    "Hello World!\n",
    "the quick brown fox jumps over the lazy dog",
    "Kodierter Text: äöü ß €",
    "aaaaaaaaaabbbbbcccdde",
]


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture(params=SAMPLE_TEXTS)
def sample_text(request):
    """Each of the sample texts in turn."""
    return request.param


@pytest.fixture()
def text_file(tmp_path: Path):
    """Create a UTF-8 text file and return its path."""
    path = tmp_path / "input.txt"
    path.write_text("mississippi river\n", encoding="utf-8")
    return path


def is_prefix_free(codes):
    """Return True if no code in ``codes`` is a prefix of another."""
    values = sorted(codes.values())
    return all(
        not b.startswith(a) for a, b in zip(values, values[1:])
    )


@pytest.fixture()
def is_prefix_free_fn():
    """
    Fixture that provides the is_prefix_free helper without importing conftest.
    """
    return is_prefix_free
