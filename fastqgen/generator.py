"""
Simulated FASTQ file generation.

Records pairing a random DNA sequence with a random quality string are
appended to a file until a target size is reached. Only whole records
are written, so the file may overshoot the target by up to one record.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

import numpy as np

from fastqgen.io.fastq import FastqRecord, write_fastq
from fastqgen.sequence.sampling import make_rng, random_quality, random_sequence

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024

# Prefix of generated record identifiers (@SEQ1, @SEQ2, ...)
RECORD_ID_PREFIX = "SEQ"

FILENAME_TEMPLATE = "simulated_{timestamp}.fastq"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def _check_positive_int(name: str, value) -> None:
    # bool is an int subclass but never a meaningful length
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class GenerationConfig:
    """
    Parameters for one generation run.

    Attributes:
        sequence_length: Bases per record
        target_size_bytes: Minimum size of the output file in bytes
    """
    sequence_length: int
    target_size_bytes: int

    def __post_init__(self):
        _check_positive_int("sequence_length", self.sequence_length)
        _check_positive_int("target_size_bytes", self.target_size_bytes)

    @classmethod
    def from_megabytes(cls, sequence_length: int, size_mb: int) -> "GenerationConfig":
        """Build a config from a target size in megabytes (1 MB = 1024 * 1024 bytes)."""
        _check_positive_int("size_mb", size_mb)
        return cls(sequence_length=sequence_length, target_size_bytes=size_mb * BYTES_PER_MB)

    def record_size(self, index: int) -> int:
        """Size in bytes of the record with the given 1-based index."""
        header = len(f"@{RECORD_ID_PREFIX}{index}")
        return header + 2 * self.sequence_length + len("+") + 4


@dataclass
class GenerationResult:
    """Summary of a finished generation run."""
    path: Path
    records: int
    bytes_written: int


def generate_records(
    config: GenerationConfig,
    rng: Optional[np.random.Generator] = None
) -> Iterator[FastqRecord]:
    """
    Yield an endless stream of random FASTQ records.

    Identifiers are sequential starting at SEQ1.

    Args:
        config: Generation parameters
        rng: Random source; a fresh entropy-seeded one if not given

    Yields:
        FastqRecord objects
    """
    if rng is None:
        rng = make_rng()

    index = 1
    while True:
        yield FastqRecord(
            id=f"{RECORD_ID_PREFIX}{index}",
            sequence=random_sequence(config.sequence_length, rng),
            quality=random_quality(config.sequence_length, rng),
        )
        index += 1


def output_filename(
    now: Optional[datetime] = None,
    directory: Optional[Union[str, Path]] = None
) -> Path:
    """
    Timestamp-based output name, e.g. ``simulated_20240131235959.fastq``.

    Two runs within the same second get the same name and the later run
    overwrites the earlier file.

    Args:
        now: Time to format (defaults to the current local time)
        directory: Optional parent directory

    Returns:
        Path of the output file
    """
    if now is None:
        now = datetime.now()
    name = FILENAME_TEMPLATE.format(timestamp=now.strftime(TIMESTAMP_FORMAT))
    if directory is None:
        return Path(name)
    return Path(directory) / name


def generate_fastq_file(
    filepath: Union[str, Path],
    config: GenerationConfig,
    seed: Optional[int] = None
) -> GenerationResult:
    """
    Write random FASTQ records to a file until it reaches the target size.

    The file is created (or truncated) and always closed, including when
    a write fails. I/O errors propagate unchanged.

    Args:
        filepath: Output file path
        config: Generation parameters
        seed: Optional seed for reproducible output

    Returns:
        GenerationResult describing what was written

    Example:
        >>> config = GenerationConfig(sequence_length=4, target_size_bytes=40)
        >>> generate_fastq_file("reads.fastq", config, seed=0).records
        3
    """
    filepath = Path(filepath)
    rng = make_rng(seed)

    logger.info(
        "Generating %s: %d bp reads, target %d bytes",
        filepath, config.sequence_length, config.target_size_bytes
    )

    # newline="\n" keeps output byte-identical across platforms
    with open(filepath, "w", encoding="ascii", newline="\n") as f:
        count, written = write_fastq(
            generate_records(config, rng), f, config.target_size_bytes
        )
        f.flush()

    logger.info("Wrote %d records (%d bytes) to %s", count, written, filepath)
    return GenerationResult(path=filepath, records=count, bytes_written=written)
