"""
fastqgen: simulated FASTQ files for pipeline testing

This package provides tools for:
- Random DNA sequence and quality string generation
- FASTQ record formatting and size-bounded writing
- A command-line generator producing timestamped output files

Sequences are uniform over A/T/C/G and qualities uniform over
ASCII 33-73; there is no biological or error-model realism.
"""

from fastqgen.version import __version__

__author__ = "fastqgen Contributors"

from fastqgen.io import (
    write_fastq,
    FastqRecord,
    PHRED33_OFFSET,
)

from fastqgen.sequence import (
    random_sequence,
    random_quality,
    make_rng,
    NUCLEOTIDES,
    QUALITY_ALPHABET,
)

from fastqgen.generator import (
    GenerationConfig,
    GenerationResult,
    generate_records,
    generate_fastq_file,
    output_filename,
)

__all__ = [
    # I/O
    "write_fastq",
    "FastqRecord",
    "PHRED33_OFFSET",
    # Sampling
    "random_sequence",
    "random_quality",
    "make_rng",
    "NUCLEOTIDES",
    "QUALITY_ALPHABET",
    # Generation
    "GenerationConfig",
    "GenerationResult",
    "generate_records",
    "generate_fastq_file",
    "output_filename",
]
