"""
FASTQ record type and size-bounded writer.

FASTQ is a text-based format for storing nucleotide sequences
along with quality scores. Each record consists of 4 lines:
1. Header line starting with '@' followed by sequence ID
2. Sequence line
3. '+' separator line
4. Quality line (ASCII-encoded Phred scores)
"""

from dataclasses import dataclass
from typing import IO, Iterable, Tuple


# Phred quality score encoding offset (Sanger/Illumina 1.8+)
PHRED33_OFFSET = 33


@dataclass(frozen=True)
class FastqRecord:
    """
    Represents a single FASTQ record.

    Attributes:
        id: Sequence identifier (without the leading '@')
        sequence: The nucleotide sequence
        quality: Quality string (ASCII-encoded), same length as sequence
    """
    id: str
    sequence: str
    quality: str

    def __post_init__(self):
        if len(self.sequence) != len(self.quality):
            raise ValueError(
                f"Sequence and quality lengths differ for {self.id}: "
                f"{len(self.sequence)} != {len(self.quality)}"
            )

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f"@{self.id}\n{self.sequence}\n+\n{self.quality}"

    def to_block(self) -> str:
        """Format as a newline-terminated four-line block."""
        return str(self) + "\n"


def write_fastq(
    records: Iterable[FastqRecord],
    handle: IO[str],
    target_size: int
) -> Tuple[int, int]:
    """
    Write whole records to an open text handle until a size is reached.

    Records are consumed from ``records`` one at a time and appended in
    full; the last record is never truncated, so the returned size can
    exceed ``target_size`` by up to one record.

    A target of zero or less writes nothing. Callers going through
    GenerationConfig never pass one, since it rejects such sizes.

    Args:
        records: Iterable of FastqRecord objects (may be infinite)
        handle: Text handle opened for writing (ASCII output)
        target_size: Stop once at least this many bytes are written

    Returns:
        Tuple of (records written, bytes written)

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> write_fastq([FastqRecord("read1", "ACGT", "IIII")] * 3, out, 20)
        (2, 38)
    """
    count = 0
    written = 0
    if target_size <= 0:
        return count, written

    for record in records:
        block = record.to_block()
        handle.write(block)
        # Blocks are pure ASCII so characters equal bytes
        written += len(block)
        count += 1
        if written >= target_size:
            break
    return count, written
