"""
Tests for simulated FASTQ file generation.
"""

import re
from datetime import datetime
from itertools import islice
from pathlib import Path

import numpy as np
import pytest

from fastqgen.generator import (
    BYTES_PER_MB,
    GenerationConfig,
    generate_fastq_file,
    generate_records,
    output_filename,
)
from fastqgen.sequence import make_rng


class TestGenerationConfig:
    """Test parameter validation."""

    def test_valid(self):
        config = GenerationConfig(sequence_length=100, target_size_bytes=1000)
        assert config.sequence_length == 100
        assert config.target_size_bytes == 1000

    def test_from_megabytes(self):
        config = GenerationConfig.from_megabytes(150, 3)
        assert config.target_size_bytes == 3 * 1024 * 1024 == 3 * BYTES_PER_MB

    @pytest.mark.parametrize("length", [0, -1, 2.5, "10", True, None])
    def test_invalid_sequence_length(self, length):
        with pytest.raises(ValueError):
            GenerationConfig(sequence_length=length, target_size_bytes=100)

    @pytest.mark.parametrize("size", [0, -100, 1.0])
    def test_invalid_target_size(self, size):
        with pytest.raises(ValueError):
            GenerationConfig(sequence_length=10, target_size_bytes=size)

    def test_invalid_megabytes(self):
        with pytest.raises(ValueError):
            GenerationConfig.from_megabytes(10, 0)

    def test_numpy_integers_accepted(self):
        config = GenerationConfig(np.int64(4), np.int32(40))
        assert config.sequence_length == 4

    def test_immutable(self):
        config = GenerationConfig(4, 40)
        with pytest.raises(AttributeError):
            config.sequence_length = 5

    def test_record_size(self):
        config = GenerationConfig(4, 40)
        assert config.record_size(1) == len("@SEQ1\nACGT\n+\nIIII\n")
        assert config.record_size(10) == config.record_size(1) + 1


class TestGenerateRecords:

    def test_sequential_ids(self):
        records = list(islice(generate_records(GenerationConfig(5, 10), make_rng(0)), 12))
        assert [r.id for r in records] == [f"SEQ{i}" for i in range(1, 13)]

    def test_lengths(self):
        for record in islice(generate_records(GenerationConfig(33, 10), make_rng(1)), 20):
            assert len(record.sequence) == 33
            assert len(record.quality) == 33

    def test_seeded_stream_reproducible(self):
        config = GenerationConfig(20, 10)
        first = list(islice(generate_records(config, make_rng(9)), 5))
        second = list(islice(generate_records(config, make_rng(9)), 5))
        assert first == second

    def test_default_rng(self):
        record = next(generate_records(GenerationConfig(8, 10)))
        assert record.id == "SEQ1"
        assert len(record) == 8


class TestGenerateFastqFile:
    """Test the full generation loop against the output file."""

    def test_small_target(self, tmp_path, split_records):
        path = tmp_path / "small.fastq"
        result = generate_fastq_file(path, GenerationConfig(4, 40), seed=0)

        records = split_records(path)
        # 18 bytes per record: 36 < 40 so a third record is needed
        assert result.records == 3 == len(records)
        assert result.bytes_written == 54 == path.stat().st_size
        assert [r[0] for r in records] == ["@SEQ1", "@SEQ2", "@SEQ3"]
        assert result.path == path

    @pytest.mark.parametrize("length,target", [(1, 1), (4, 40), (75, 5000), (150, 20000)])
    def test_record_structure(self, tmp_path, split_records, length, target):
        path = tmp_path / "reads.fastq"
        result = generate_fastq_file(path, GenerationConfig(length, target), seed=length)

        records = split_records(path)
        assert len(records) == result.records
        for i, (header, seq, plus, qual) in enumerate(records, start=1):
            assert header == f"@SEQ{i}"
            assert plus == "+"
            assert len(seq) == length
            assert len(qual) == length
            assert set(seq) <= set("ATCG")
            assert all(33 <= ord(c) <= 73 for c in qual)

    @pytest.mark.parametrize("length,target", [(4, 40), (10, 1000), (100, 12345)])
    def test_size_bounds(self, tmp_path, length, target):
        path = tmp_path / "reads.fastq"
        config = GenerationConfig(length, target)
        result = generate_fastq_file(path, config, seed=1)

        size = path.stat().st_size
        assert size == result.bytes_written
        assert target <= size < target + config.record_size(result.records)

    def test_megabyte_target(self, tmp_path):
        path = tmp_path / "one_mb.fastq"
        config = GenerationConfig.from_megabytes(100, 1)
        result = generate_fastq_file(path, config, seed=5)
        assert path.stat().st_size >= BYTES_PER_MB
        assert path.stat().st_size - BYTES_PER_MB < config.record_size(result.records)

    def test_seed_reproducible(self, tmp_path):
        config = GenerationConfig(50, 2000)
        generate_fastq_file(tmp_path / "a.fastq", config, seed=123)
        generate_fastq_file(tmp_path / "b.fastq", config, seed=123)
        assert (tmp_path / "a.fastq").read_bytes() == (tmp_path / "b.fastq").read_bytes()

    def test_unix_newlines(self, tmp_path):
        path = tmp_path / "reads.fastq"
        generate_fastq_file(path, GenerationConfig(10, 200), seed=0)
        assert b"\r" not in path.read_bytes()

    def test_existing_file_overwritten(self, tmp_path):
        path = tmp_path / "reads.fastq"
        config = GenerationConfig(30, 500)
        generate_fastq_file(path, config, seed=1)
        generate_fastq_file(path, config, seed=2)

        generate_fastq_file(tmp_path / "expected.fastq", config, seed=2)
        assert path.read_bytes() == (tmp_path / "expected.fastq").read_bytes()

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            generate_fastq_file(tmp_path / "nope" / "reads.fastq", GenerationConfig(4, 40))

    def test_write_error_closes_file(self, tmp_path, monkeypatch):
        import fastqgen.generator as generator

        handles = []
        real_open = open

        def tracking_open(*args, **kwargs):
            handle = real_open(*args, **kwargs)
            handles.append(handle)
            return handle

        def failing_write(records, handle, target_size):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(generator, "open", tracking_open, raising=False)
        monkeypatch.setattr(generator, "write_fastq", failing_write)

        with pytest.raises(OSError, match="No space left"):
            generate_fastq_file(tmp_path / "reads.fastq", GenerationConfig(4, 40))
        assert handles and all(h.closed for h in handles)


class TestOutputFilename:

    def test_format(self):
        name = output_filename(now=datetime(2024, 1, 31, 23, 59, 58))
        assert name == Path("simulated_20240131235958.fastq")

    def test_directory(self, tmp_path):
        name = output_filename(now=datetime(2024, 5, 6, 7, 8, 9), directory=tmp_path)
        assert name == tmp_path / "simulated_20240506070809.fastq"

    def test_current_time(self):
        assert re.fullmatch(r"simulated_\d{14}\.fastq", str(output_filename()))

    def test_same_second_same_name(self):
        now = datetime(2024, 1, 1, 12, 0, 0)
        assert output_filename(now=now) == output_filename(now=now.replace(microsecond=999999))
