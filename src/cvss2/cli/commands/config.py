"""Configuration management commands"""

import os

import click

from ...config.settings import CVSSConfig


@click.command('config')
@click.option('--show-env', is_flag=True, help='Show all environment variables')
@click.option('--validate', is_flag=True, help='Validate configuration')
@click.option('--env-file', help='Specify custom .env file path')
def config_cmd(show_env, validate, env_file):
    """Show current CVSS2 configuration

    Example:
        cvss2 config
        cvss2 config --show-env
        cvss2 config --validate
        cvss2 config --env-file /path/to/custom.env
    """
    config = CVSSConfig.from_env(env_file)

    click.echo("🔧 CVSS2 CONFIGURATION")
    click.echo("=" * 50)

    click.echo("\n⚙️  Scoring Settings:")
    click.echo(f"   Log Level: {config.log_level}")
    click.echo(f"   Default Format: {config.default_format}")
    click.echo(f"   Default Group: {config.default_group}")
    click.echo(f"   Show Subscores: {config.show_subscores}")

    if show_env:
        click.echo("\n🔐 Environment Variables:")
        env_vars = [
            'CVSS2_LOG_LEVEL',
            'CVSS2_DEFAULT_FORMAT',
            'CVSS2_DEFAULT_GROUP',
            'CVSS2_SHOW_SUBSCORES',
        ]
        for var in env_vars:
            click.echo(f"   {var}: {os.getenv(var) or 'Not Set'}")

    if validate:
        click.echo("\n✅ Configuration Validation:")
        issues = config.validate()

        if not issues:
            click.echo("   ✅ Configuration looks good!")
        else:
            click.echo("   ❌ Issues found:")
            for issue in issues:
                click.echo(f"      ❌ {issue}")
