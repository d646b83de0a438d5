import pytest


def _split_records(path):
    with open(path, "r", encoding="ascii", newline="") as f:
        text = f.read()
    assert text.endswith("\n")
    lines = text[:-1].split("\n")
    assert len(lines) % 4 == 0
    return [tuple(lines[i:i + 4]) for i in range(0, len(lines), 4)]


@pytest.fixture
def split_records():
    """Return a function reading a FASTQ file into (header, seq, plus, qual) tuples."""
    return _split_records
