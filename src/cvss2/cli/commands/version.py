"""Version information command"""

import platform
import sys
from importlib.metadata import PackageNotFoundError, version as dist_version

import click

from ... import __version__


@click.command()
def version():
    """Show CVSS2 version and system information"""
    click.echo("🚀 CVSS V2 SCORING ENGINE")
    click.echo("=" * 50)

    click.echo("\n📦 Version Information:")
    click.echo(f"   cvss2 Version: {__version__}")

    click.echo("\n🧮 Scoring Equations:")
    click.echo("   Base = round1(((0.6 x Impact) + (0.4 x Exploitability) - 1.5) x f(Impact))")
    click.echo("   Temporal = round1(Base x E x RL x RC)")
    click.echo("   Environmental = round1((AdjustedTemporal + (10 - AdjustedTemporal) x CDP) x TD)")

    click.echo("\n🏗️  System Information:")
    click.echo(f"   Python Version: {sys.version.split()[0]}")
    click.echo(f"   Platform: {platform.platform()}")

    click.echo("\n📚 Dependencies:")
    click.echo(f"   • click: {_distribution_version('click')}")
    click.echo(f"   • python-dotenv: {_distribution_version('python-dotenv')}")

    click.echo("\n🔗 Resources:")
    click.echo("   • CVSS v2 Guide: https://www.first.org/cvss/v2/guide")
    click.echo("   • NVD CVSS v2 Calculator: https://nvd.nist.gov/vuln-metrics/cvss/v2-calculator")


def _distribution_version(name: str) -> str:
    try:
        return dist_version(name)
    except PackageNotFoundError:
        return "not installed"
