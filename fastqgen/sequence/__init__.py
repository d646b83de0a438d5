"""
Random sequence and quality string generation.
"""

from fastqgen.sequence.sampling import (
    random_sequence,
    random_quality,
    make_rng,
    NUCLEOTIDES,
    QUALITY_ALPHABET,
)

__all__ = [
    "random_sequence",
    "random_quality",
    "make_rng",
    "NUCLEOTIDES",
    "QUALITY_ALPHABET",
]
