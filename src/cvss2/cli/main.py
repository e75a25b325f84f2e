"""CVSS2 CLI Main Entry Point"""

import logging

import click

from ..config.settings import CVSSConfig
from .commands.bulk import bulk
from .commands.config import config_cmd
from .commands.metrics import metrics
from .commands.score import score
from .commands.version import version


def setup_logging(level: str):
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@click.group()
@click.option('--log-level', default=None, help='Logging level (default: CVSS2_LOG_LEVEL or WARNING)')
@click.option('--env-file', help='Configuration .env file path')
@click.pass_context
def cli(ctx, log_level, env_file):
    """CVSS v2 scoring CLI

    Parses CVSS v2 vector strings and computes Base, Temporal and
    Environmental scores.
    """
    config = CVSSConfig.from_env(env_file)
    if log_level:
        config.log_level = log_level
    setup_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


# Register commands
cli.add_command(score)
cli.add_command(bulk)
cli.add_command(metrics)
cli.add_command(config_cmd, name='config')
cli.add_command(version)


if __name__ == '__main__':
    cli()
