import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Callable, Optional

import click
from dotenv import load_dotenv

from cbaparse import parser
from cbaparse.entries import flatten_entries, summarize_entries
from cbaparse.json_utils import json_dumps
from cbaparse.parser.headings import resolve_heading
from cbaparse.parser.segmenter import segment_articles
from cbaparse.serializer import EXTENSIONS, load_records, write_outputs

try:
    __version__ = version("cbaparse")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="CBAPARSE_LOG_FILE",
)
@click.version_option(__version__, prog_name="cbaparse")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def parser_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the input argument and the parser tuning options."""

    decorators = [
        click.argument(
            "input_path",
            envvar="CBAPARSE_INPUT",
            type=click.Path(dir_okay=False),
        ),
        click.option(
            "--min-content-length",
            type=click.IntRange(min=0),
            default=10,
            show_default=True,
            envvar="CBAPARSE_MIN_CONTENT_LENGTH",
            help="Shortest section or intro text that is kept.",
        ),
        click.option(
            "--lookahead",
            type=click.IntRange(min=1),
            default=4,
            show_default=True,
            envvar="CBAPARSE_LOOKAHEAD",
            help="Lines searched after a marker for its title.",
        ),
        click.option(
            "--start-line",
            type=click.IntRange(min=0),
            default=0,
            show_default=True,
            help="Ignore every line before this 0-based index.",
        ),
        click.option(
            "--detect-restart/--no-detect-restart",
            default=True,
            show_default=True,
            help="Skip a table of contents repeating the markers.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _load(
    input_path: str,
    min_content_length: int,
    lookahead: int,
    start_line: int,
    detect_restart: bool,
) -> tuple[parser.Document, parser.ParserOptions]:
    """Load the input document and build the parser options.

    Throws:
        click.ClickException: If the document cannot be found.
    """

    options = parser.ParserOptions(
        min_content_length=min_content_length,
        lookahead=lookahead,
        start_line=start_line,
        detect_restart=detect_restart,
    )
    try:
        document = parser.load_document(input_path)
    except parser.DocumentNotFound as exc:
        raise click.ClickException(str(exc)) from exc
    return document, options


def _echo_report(report: parser.VerificationReport) -> None:
    """Print the verification report to the console."""

    for line in parser.format_report(report):
        click.echo(line)


@cli.command("parse")
@parser_options
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, dir_okay=True),
    default="cba-parsed",
    show_default=True,
    envvar="CBAPARSE_OUTPUT_DIR",
    help="Directory receiving the article files.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(EXTENSIONS)),
    default="json",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Exit with an error when verification finds problems.",
)
def parse_command(
    input_path: str,
    min_content_length: int = 10,
    lookahead: int = 4,
    start_line: int = 0,
    detect_restart: bool = True,
    output_dir: str = "cba-parsed",
    output_format: str = "json",
    strict: bool = False,
) -> None:
    """Parse an agreement into article and section records.

    Args:
        input_path: Plain text agreement to parse.
        min_content_length: Shortest section or intro text that is kept.
        lookahead: Lines searched after a marker for its title.
        start_line: Lines before this index are ignored.
        detect_restart: Skip a table of contents repeating the markers.
        output_dir: Directory receiving the article files.
        output_format: Format of the written records.
        strict: Fail when verification finds problems.
    """

    document, options = _load(
        input_path, min_content_length, lookahead, start_line, detect_restart
    )
    agreement = parser.parse_document(document, options)

    written = write_outputs(
        agreement.articles, Path(output_dir), output_format
    )
    click.echo(
        f"Parsed {len(agreement.articles)} articles with "
        f"{agreement.section_count} sections from {len(document)} lines"
    )
    click.echo(f"Wrote {len(written)} files to {output_dir}")

    report = parser.verify(agreement)
    _echo_report(report)
    if strict and not report.ok:
        raise click.ClickException("Verification found problems")


@cli.command()
@parser_options
def verify(
    input_path: str,
    min_content_length: int = 10,
    lookahead: int = 4,
    start_line: int = 0,
    detect_restart: bool = True,
) -> None:
    """Parse an agreement and print the verification report only."""

    document, options = _load(
        input_path, min_content_length, lookahead, start_line, detect_restart
    )
    _echo_report(parser.verify(parser.parse_document(document, options)))


@cli.command()
@parser_options
def locate(
    input_path: str,
    min_content_length: int = 10,
    lookahead: int = 4,
    start_line: int = 0,
    detect_restart: bool = True,
) -> None:
    """List the article markers found in an agreement."""

    document, options = _load(
        input_path, min_content_length, lookahead, start_line, detect_restart
    )
    segmentation = segment_articles(
        document,
        start_line=options.start_line,
        detect_restart=options.detect_restart,
        min_content_length=options.min_content_length,
        lookahead=options.lookahead,
    )

    click.echo(f"Found {len(segmentation.spans)} articles:")
    for span in segmentation.spans:
        heading = resolve_heading(
            document, span.start, stop=span.end, lookahead=options.lookahead
        )
        label = f"ARTICLE {span.numeral}"
        click.echo(f"Line {span.start:>6}: {label:<16} {heading.title}")

    click.echo(f"Front matter ends at line {segmentation.front_matter_end}")
    for anomaly in segmentation.anomalies:
        click.echo(f"  - {anomaly}")


@cli.command()
@click.argument(
    "combined_file", type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write the rows to FILE instead of the console.",
)
def entries(combined_file: str, output_path: Optional[str] = None) -> None:
    """Flatten a combined record into ordered storage rows.

    Args:
        combined_file: JSON or YAML file holding all article records.
        output_path: Optional destination for the JSON rows.
    """

    rows = flatten_entries(load_records(Path(combined_file)))
    content = json_dumps(rows, indent=True)
    if output_path:
        Path(output_path).write_text(content + "\n", encoding="utf-8")
        click.echo(f"Wrote {len(rows)} entries to {output_path}")
    else:
        click.echo(content)


@cli.command()
@click.argument(
    "combined_file", type=click.Path(exists=True, dir_okay=False)
)
def summary(combined_file: str) -> None:
    """Print article, section and total row counts of a combined record."""

    counts = summarize_entries(
        flatten_entries(load_records(Path(combined_file)))
    )
    click.echo(f"Articles: {counts['articles']}")
    click.echo(f"Sections: {counts['sections']}")
    click.echo(f"Total entries: {counts['total']}")
