import os
import random
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from unittest import mock

from zbase32.encoding.tables import ZBASE32_ALPHABET

# =============================================================================
# Test Constants
# =============================================================================

# Characters that must never decode (taken from the common punctuation and
# whitespace a reader might mistype).
INVALID_SAMPLE = ",./;'[]\\`= \t\r\n~!@#$%^&*()_+:\"<>?"

# Misread character -> canonical character it replaces in encoded output.
TRANSCRIPTION_SWAPS = (
    ("o", "0"),
    ("u", "v"),
    ("z", "2"),
    ("1", "l"),
    ("1", "|"),
)


# =============================================================================
# Reference Encoder
# =============================================================================


def reference_encode(data: bytes) -> str:
    """Bit-string encoder used to derive expected vectors from the alphabet."""
    bits = "".join(f"{byte:08b}" for byte in data)
    if len(bits) % 5:
        bits += "0" * (5 - len(bits) % 5)
    return "".join(ZBASE32_ALPHABET[int(bits[i : i + 5], 2)] for i in range(0, len(bits), 5))


def with_separators(text: str) -> str:
    return "-".join(text[i : i + 8] for i in range(0, len(text), 8))


# =============================================================================
# Data Builders
# =============================================================================


def make_payloads(count: int = 100, *, seed: int = 0x5EED, max_len: int = 255) -> list[bytes]:
    """Deterministic pseudo-random payloads of length 1..max_len."""
    rng = random.Random(seed)
    return [rng.randbytes(rng.randint(1, max_len)) for _ in range(count)]


def all_lengths(max_len: int = 255, *, seed: int = 0xB32) -> list[bytes]:
    """One pseudo-random payload for every length 0..max_len."""
    rng = random.Random(seed)
    return [rng.randbytes(length) for length in range(max_len + 1)]


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


@contextmanager
def temp_files(
    **kwargs: bytes | str,
) -> Generator[dict[str, Path], None, None]:
    """Create temporary files with specified content.

    Usage:
        with temp_files(input=b"data", config="[encode]") as paths:
            paths["input"]  # Path to file with b"data"
            paths["config"]  # Path to file with "[encode]"
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        tmp_path = Path(tmpdir)
        result: dict[str, Path] = {}
        for name, content in kwargs.items():
            file_path = tmp_path / name
            if isinstance(content, bytes):
                file_path.write_bytes(content)
            else:
                file_path.write_text(content, encoding="utf-8")
            result[name] = file_path
        result["_dir"] = tmp_path
        yield result


@contextmanager
def temp_directory() -> Generator[Path, None, None]:
    """Create a temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
