"""Command-line interface for file-content."""
import sys
import logging
from pathlib import Path

import click
from rich.markup import escape

from .core.errors import FileContentError
from .core.file_accessor import FileAccessor
from .core.models import Config, Encoded, Encoding, File
from .utils.console import ConsoleManager
from .utils.formatting import format_file

ENCODING_CHOICES = [encoding.label for encoding in Encoding]


def setup_logging(level: str) -> None:
    """Configure logging for the given level name."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='[%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _fail(ctx: click.Context, console: ConsoleManager, error: Exception) -> None:
    console.print_error(str(error))
    if ctx.obj['debug']:
        console.print_exception()
    ctx.exit(1)


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Logging level (default: FILE_CONTENT_LOG_LEVEL or WARNING)')
@click.option('--debug', is_flag=True, help='Print tracebacks for errors')
@click.option('--plain', is_flag=True, help='Disable colored output')
@click.version_option(package_name='file-content')
@click.pass_context
def main(ctx: click.Context, log_level: str, debug: bool, plain: bool) -> None:
    """
    Detect the text encoding of files and show their decoded content.

    Supported encodings: UTF-8, UTF-8-BOM, UTF-16-BE and UTF-16-LE.
    Anything else is reported as Binary.

    Examples:

        file-content show notes.txt

        file-content detect *.csv

        file-content convert report.txt --to UTF-8-BOM
    """
    config = Config()
    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_level)

    ctx.obj = {
        'config': config,
        'accessor': FileAccessor(config),
        'console': ConsoleManager(force_plain=plain),
        'debug': debug,
    }


@main.command()
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--hexdump-bytes', type=int, default=None,
              help='Leading bytes to dump for binary files (default: FILE_CONTENT_HEXDUMP_BYTES or 256)')
@click.pass_context
def show(ctx: click.Context, path: Path, hexdump_bytes: int) -> None:
    """Show a file's encoding and decoded content."""
    config: Config = ctx.obj['config']
    console: ConsoleManager = ctx.obj['console']

    try:
        file = ctx.obj['accessor'].load(path)
    except (OSError, FileContentError) as e:
        _fail(ctx, console, e)
        return

    limit = hexdump_bytes if hexdump_bytes is not None else config.hexdump_bytes
    console.print_text(format_file(file, limit))


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def detect(ctx: click.Context, paths: tuple) -> None:
    """Print the detected encoding of each file."""
    console: ConsoleManager = ctx.obj['console']
    accessor: FileAccessor = ctx.obj['accessor']
    failures = 0

    for path in paths:
        try:
            file = accessor.load(path)
        except (OSError, FileContentError) as e:
            console.print_error(f"{path}: {e}")
            failures += 1
            continue
        console.print(f"[label]{file.encoding_label:<10}[/label] [path]{escape(str(file.path))}[/path]")

    if failures:
        ctx.exit(1)


@main.command()
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--to', 'target', required=True, type=click.Choice(ENCODING_CHOICES, case_sensitive=False),
              help='Encoding to write')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output path (default: overwrite PATH)')
@click.pass_context
def convert(ctx: click.Context, path: Path, target: str, output: Path) -> None:
    """Re-save a text file in another encoding."""
    console: ConsoleManager = ctx.obj['console']
    accessor: FileAccessor = ctx.obj['accessor']

    try:
        file = accessor.load(path)
        if not isinstance(file.content, Encoded):
            console.print_error(f"{path} is binary, nothing to convert")
            ctx.exit(1)

        encoding = Encoding.from_label(target)
        converted = File(output or path, Encoded(encoding, file.content.text))
        accessor.save(converted)
    except (OSError, FileContentError) as e:
        _fail(ctx, console, e)
        return

    console.print_success(
        f"{file.path} ({file.encoding_label}) -> {converted.path} ({converted.encoding_label})"
    )


if __name__ == '__main__':
    main()
