"""Single vector score command"""

import logging
import sys

import click

from ...processing.processor import VectorProcessor
from ..formatters.csv import CSVFormatter
from ..formatters.json import JSONFormatter
from ..formatters.table import TableFormatter


@click.command()
@click.argument('vector')
@click.option('--group', type=click.Choice(['auto', 'base', 'temporal', 'environmental']),
              default=None, help='Metric group to parse the vector as (default: detect)')
@click.option('--format', type=click.Choice(['json', 'table', 'csv']), default=None,
              help='Output format')
@click.option('--output', '-o', help='Output file path')
@click.option('--debug', is_flag=True, help='Enable debug logging for this command')
@click.pass_context
def score(ctx, vector, group, format, output, debug):
    """Parse and score a single CVSS v2 vector

    Examples:
        cvss2 score AV:N/AC:L/Au:N/C:N/I:N/A:C
        cvss2 score AV:N/AC:L/Au:N/C:N/I:N/A:C/E:F/RL:OF/RC:C
        cvss2 score "AV:N/AC:L/Au:N/C:P/I:P/A:P" --format json
        cvss2 score E:F/RL:OF/RC:C/AV:N/AC:L/Au:N/C:C/I:C/A:C --group environmental
    """
    config = ctx.obj['config']
    format = format or config.default_format

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        config.log_level = 'DEBUG'

    processor = VectorProcessor(config)
    result = processor.process_single_vector(vector, group)

    if format == 'json':
        output_text = JSONFormatter.format_single(result)
    elif format == 'csv':
        output_text = CSVFormatter.format_bulk([result])
    else:
        output_text = TableFormatter.format_single(result, config.show_subscores)

    if output:
        with open(output, 'w') as f:
            f.write(output_text)
        click.echo(f"Results saved to {output}")
    else:
        click.echo(output_text)

    if result.error:
        sys.exit(1)
