"""
FASTQ output utilities.

This module provides the record type and writer used to produce
simulated FASTQ files.
"""

from fastqgen.io.fastq import (
    write_fastq,
    FastqRecord,
    PHRED33_OFFSET,
)

__all__ = [
    "write_fastq",
    "FastqRecord",
    "PHRED33_OFFSET",
]
