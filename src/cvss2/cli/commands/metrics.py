"""Metric reference table command"""

import sys

import click

from ...core.metrics import METRICS_BY_GROUP, METRICS_BY_KEY


def _echo_metric(kind):
    click.echo(f"   {kind.key():<4}{kind.title()}")
    for member in kind.values():
        click.echo(f"      {member.token:<4}{member.label:<20}{member.weight_as_string}")


@click.command()
@click.argument('key', required=False)
def metrics(key):
    """List CVSS v2 metrics, their tokens and weights

    Examples:
        cvss2 metrics
        cvss2 metrics Au
    """
    if key:
        kind = METRICS_BY_KEY.get(key)
        if kind is None:
            click.echo(f"Error: Unknown metric key '{key}'", err=True)
            sys.exit(1)
        _echo_metric(kind)
        return

    for group, kinds in METRICS_BY_GROUP.items():
        click.echo(f"\n{group.value.upper()} METRICS:")
        for kind in kinds:
            _echo_metric(kind)
