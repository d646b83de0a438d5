"""
Command-line interface for fastqgen.

Usage:
    fastqgen SEQUENCE_LENGTH FILE_SIZE_MB [--seed N] [--output PATH]

Every failure prints a single ``Error: ...`` line on stderr and exits
with status 1.
"""

import logging
import sys
from pathlib import Path

import click

from fastqgen.version import __version__
from fastqgen.generator import GenerationConfig, generate_fastq_file, output_filename

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

USAGE = "expected 2 arguments, usage: fastqgen <sequenceLength> <fileSizeInMB>"


class PositiveNumber(click.ParamType):
    """Integer argument that must be strictly positive."""

    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            number = value
        else:
            # Plain ASCII digits only: no "1_0", padding or other scripts
            text = str(value)
            digits = text[1:] if text.startswith("-") else text
            if not (text.isascii() and digits.isdigit()):
                self.fail(
                    "please provide valid numbers for sequence length and file size",
                    param, ctx,
                )
            number = int(text)
        if number <= 0:
            self.fail(
                "both sequence length and file size must be positive numbers",
                param, ctx,
            )
        return number


POSITIVE_NUMBER = PositiveNumber()


# Unknown options pass through as arguments so "-5" reaches validation
@click.command(context_settings={
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
})
@click.version_option(version=__version__, prog_name="fastqgen")
@click.argument("sequence_length", type=POSITIVE_NUMBER)
@click.argument("file_size_mb", type=POSITIVE_NUMBER)
@click.option("--seed", type=click.IntRange(min=0), default=None,
              help="Seed for reproducible output (default: OS entropy)")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              default=None,
              help="Output file (default: simulated_YYYYMMDDHHMMSS.fastq)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(sequence_length, file_size_mb, seed, output, verbose):
    """
    Generate a simulated FASTQ file of random reads.

    SEQUENCE_LENGTH is the length of each DNA sequence in base pairs
    (e.g. 100). FILE_SIZE_MB is the desired output file size in
    megabytes (e.g. 10).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GenerationConfig.from_megabytes(sequence_length, file_size_mb)
    filepath = output if output is not None else output_filename()

    try:
        result = generate_fastq_file(filepath, config, seed=seed)
    except OSError as e:
        logger.debug("Generation failed", exc_info=True)
        reason = e.strerror or str(e)
        raise click.ClickException(f"error writing FASTQ file: {reason}") from e

    click.echo(f"FASTQ file generated successfully: {result.path}")
    click.echo(f"Sequence length: {sequence_length} bp")
    click.echo(f"Target file size: {file_size_mb} MB")
    return result


def main(argv=None) -> int:
    """
    Console entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    try:
        cli.main(args=argv, prog_name="fastqgen", standalone_mode=False)
    except click.MissingParameter:
        click.echo(f"Error: {USAGE}", err=True)
        return EXIT_FAILURE
    except click.BadParameter as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        return EXIT_FAILURE
    except click.UsageError:
        click.echo(f"Error: {USAGE}", err=True)
        return EXIT_FAILURE
    except click.ClickException as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        return EXIT_FAILURE
    except click.Abort:
        click.echo("Error: aborted", err=True)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
