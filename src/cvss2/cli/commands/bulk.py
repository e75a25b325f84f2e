"""Bulk vector scoring command"""

import logging
import sys

import click

from ...processing.processor import VectorProcessor
from ..formatters.csv import CSVFormatter
from ..formatters.json import JSONFormatter
from ..formatters.table import TableFormatter


@click.command()
@click.option('--file', '-f', required=True, help='File containing vectors (one per line)')
@click.option('--output', '-o', help='Output file path')
@click.option('--format', type=click.Choice(['json', 'csv', 'table']), default=None,
              help='Output format')
@click.option('--group', type=click.Choice(['auto', 'base', 'temporal', 'environmental']),
              default=None, help='Metric group to parse every vector as (default: detect)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def bulk(ctx, file, output, format, group, debug):
    """Score multiple vectors from a file

    Blank lines and lines starting with '#' are skipped. A vector that fails
    to parse is reported in the output and does not stop the batch.

    Examples:
        cvss2 bulk --file vectors.txt
        cvss2 bulk --file vectors.txt --format csv -o scores.csv
        cvss2 bulk --file vectors.txt --group temporal
    """
    config = ctx.obj['config']
    format = format or config.default_format

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        config.log_level = 'DEBUG'

    try:
        with open(file, 'r') as f:
            vectors = VectorProcessor.read_vectors(f)
    except FileNotFoundError:
        click.echo(f"Error: File {file} not found", err=True)
        sys.exit(1)

    if not vectors:
        click.echo("Error: No vectors found in file", err=True)
        sys.exit(1)

    logging.info(f"Scoring {len(vectors)} vectors from {file}")
    results = VectorProcessor(config).process_bulk_vectors(vectors, group)

    if format == 'json':
        JSONFormatter.save_bulk(results, output)
    elif format == 'csv':
        CSVFormatter.save_bulk(results, output)
    else:
        summary = TableFormatter.format_bulk_summary(results)
        if output:
            with open(output, 'w') as f:
                f.write(summary)
            click.echo(f"Results saved to {output}")
        else:
            click.echo(summary)
