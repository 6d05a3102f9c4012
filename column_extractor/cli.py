"""
CLI entry point for column extraction.

Runs the same pipeline as the web API against a local workbook.
"""

import click
from pathlib import Path
from dotenv import load_dotenv

from column_extractor import __version__

# Load environment variables from .env file
load_dotenv()


def _extract_file(path: Path):
    """Decode and extract a workbook, turning failures into CLI errors."""
    from column_extractor.extractors.columns import extract_columns
    from column_extractor.parsers.spreadsheet import load_rows

    try:
        rows = load_rows(path)
    except ValueError as e:
        # UnsupportedFormatError and DecodeError are both ValueErrors
        raise click.ClickException(str(e))
    return extract_columns(rows, source_name=path.name)


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
def cli(log_level):
    """Excel Column Extractor - Pull columns C-F and H-K out of a workbook."""
    from column_extractor.logging_setup import setup_logging
    setup_logging(log_level)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), default="./output",
              help="Output directory for the text report")
def extract(file, output):
    """Extract columns from FILE and write them to a text report.

    Example: python -m column_extractor.cli extract annotations.xlsx
    """
    from column_extractor.generators.text_report import format_report, output_filename

    click.echo(f"Processing {file.name}...")
    result = _extract_file(file)
    click.echo(f"   Total rows: {result.total_rows}")

    output.mkdir(parents=True, exist_ok=True)
    report_path = output / output_filename(result.source_name)
    report_path.write_text(format_report(result), encoding="utf-8")

    click.echo(f"Report saved to {report_path}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--limit", "-n", default=3, show_default=True, help="Entries to show per column")
def preview(file, limit):
    """Show an extraction summary and the first entries of each column.

    Example: python -m column_extractor.cli preview annotations.xlsx
    """
    from column_extractor.generators.preview import build_preview, build_summary

    result = _extract_file(file)
    summary = build_summary(result)

    click.echo(f"File: {summary['file_name']}")
    click.echo(f"Total Rows: {summary['total_rows']}")
    click.echo(f"Columns Extracted: {', '.join(summary['columns_extracted'])}")
    click.echo(f"Lists Generated: {summary['lists_generated']}")

    for column in build_preview(result, limit=limit):
        click.echo(f"\n{column['label']}")
        for entry in column["entries"]:
            if entry["is_list"]:
                items = ", ".join(f"'{item}'" for item in entry["items"])
                click.echo(f"  Row {entry['row']}: [{items}] (parsed)")
            else:
                click.echo(f"  Row {entry['row']}: {entry['text']}")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True)
def serve(host, port):
    """Run the web API."""
    import uvicorn

    uvicorn.run("column_extractor.api:app", host=host, port=port)


if __name__ == "__main__":
    cli()
