"""
Random sampling of nucleotide and quality strings.

Characters are drawn independently and uniformly from fixed alphabets
using a numpy Generator owned by the caller.
"""

import numpy as np
from typing import Optional

from fastqgen.io.fastq import PHRED33_OFFSET

# Nucleotide alphabet, equal probability per base
NUCLEOTIDES = "ATCG"

# Highest quality character ('I', Phred 40)
MAX_QUALITY_CHAR = 73

# Quality alphabet: ASCII 33 ('!') through 73 ('I'), 41 symbols
QUALITY_ALPHABET = "".join(chr(c) for c in range(PHRED33_OFFSET, MAX_QUALITY_CHAR + 1))

_NUCLEOTIDE_CODES = np.frombuffer(NUCLEOTIDES.encode("ascii"), dtype=np.uint8)
_QUALITY_CODES = np.frombuffer(QUALITY_ALPHABET.encode("ascii"), dtype=np.uint8)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the random source for one generation run.

    Args:
        seed: Optional seed for reproducible output. When None the
            generator is seeded from OS entropy.

    Returns:
        numpy random Generator
    """
    return np.random.default_rng(seed)


def _sample(codes: np.ndarray, length: int, rng: np.random.Generator) -> str:
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    indices = rng.integers(0, len(codes), size=length)
    return codes[indices].tobytes().decode("ascii")


def random_sequence(length: int, rng: np.random.Generator) -> str:
    """
    Generate a random DNA sequence.

    Args:
        length: Number of bases
        rng: numpy random Generator

    Returns:
        String of ``length`` characters from A, T, C, G

    Example:
        >>> seq = random_sequence(10, make_rng(1))
        >>> len(seq), set(seq) <= set("ATCG")
        (10, True)
    """
    return _sample(_NUCLEOTIDE_CODES, length, rng)


def random_quality(length: int, rng: np.random.Generator) -> str:
    """
    Generate a random quality string.

    Each character is uniform over ASCII 33-73. This is not a realistic
    Phred error model.

    Args:
        length: Number of quality characters
        rng: numpy random Generator

    Returns:
        ASCII-encoded quality string
    """
    return _sample(_QUALITY_CODES, length, rng)
