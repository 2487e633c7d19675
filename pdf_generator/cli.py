"""
Command-line interface for PDF generator.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pdf_generator import __version__
from pdf_generator.constants import INVALID_PAGES_MESSAGE, INVALID_SIZE_MESSAGE, OVER_TARGET_WARNING, USAGE_MESSAGE
from pdf_generator.exceptions import InvalidPageCountError, InvalidTargetSizeError, PDFGeneratorException
from pdf_generator.generator import generate
from pdf_generator.types import format_megabytes
from pdf_generator.utils import format_file_size, inspect_artifact, parse_page_count, parse_target_size

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(verbose):
    logger = logging.getLogger("pdf_generator")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    if verbose:
        logger.addHandler(RichHandler(console=err_console, show_path=False))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.NOTSET)


def _fail(message):
    err_console.print(message, markup=False, highlight=False)
    sys.exit(1)


@click.command(name="pdf-generator", context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__)
@click.argument('output_filename', required=False)
@click.argument('number_of_pages', required=False)
@click.argument('file_size_mb', required=False)
@click.argument('extra_args', nargs=-1)
@click.option(
    '--verify',
    is_flag=True,
    help='Inspect the generated file and display its page count and size'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Enable debug logging'
)
def cli(output_filename, number_of_pages, file_size_mb, extra_args, verify, verbose):
    """
    Generate a PDF with numbered pages, optionally padded to a minimum size.

    Examples:

        pdf-generator out.pdf 3

        pdf-generator out.pdf 10 2.5

        pdf-generator out.pdf 10 1 --verify
    """
    _configure_logging(verbose)

    # Arguments after the file size are ignored.
    if not output_filename or not number_of_pages:
        _fail(USAGE_MESSAGE)

    try:
        page_count = parse_page_count(number_of_pages)
    except InvalidPageCountError:
        _fail(INVALID_PAGES_MESSAGE)

    try:
        target_size_mb = parse_target_size(file_size_mb)
    except InvalidTargetSizeError:
        _fail(INVALID_SIZE_MESSAGE)

    try:
        result = generate(output_filename, page_count, target_size_mb)
    except (PDFGeneratorException, OSError) as e:
        err_console.print(f"[bold red]✗ Error generating PDF:[/bold red] {escape(str(e))}")
        sys.exit(1)

    if result.bytes_appended:
        console.print(
            f"Appended {result.bytes_appended} bytes to match target size of {format_megabytes(target_size_mb)} MB.",
            markup=False,
            highlight=False,
        )
    if result.over_target:
        err_console.print(OVER_TARGET_WARNING, markup=False, highlight=False)

    console.print(result.summary(), markup=False, highlight=False)

    if verify:
        info = inspect_artifact(output_filename)

        table = Table(title=f"PDF Information: {escape(os.path.basename(output_filename))}", show_header=False)
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", escape(os.path.abspath(output_filename)))
        table.add_row("Number of Pages", str(info.num_pages))
        table.add_row("File Size", f"{format_file_size(info.file_size)} ({info.file_size} bytes)")
        table.add_row("Trailing Filler", f"{info.trailing_bytes} bytes")

        console.print()
        console.print(table)
        console.print()


if __name__ == '__main__':
    cli()
