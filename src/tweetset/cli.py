"""Command-line entry point for tweetset."""

from __future__ import annotations

import logging
import sys

import click

from .commands import export as export_cmd
from .commands import trending as trending_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH

# Setup logging early so submodules inherit sane defaults
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@click.group()
@click.option(
    "--config",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Path to config file (defaults to data_dir/config/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """tweetset - keyword-filtered tweets ranked by retweet count."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command("trending")
@click.option("--topic", "topics", multiple=True, help="Topic to include (repeatable; default: all topics)")
@click.option("--limit", type=int, help="Maximum number of tweets to print")
@click.pass_context
def trending(ctx: click.Context, topics: tuple[str, ...], limit: int | None) -> None:
    """Print tweets matching the topics, most retweeted first."""
    try:
        trending_cmd.run(ctx.obj["config_path"], list(topics), limit=limit, echo=click.echo)
    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Trending command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("export")
@click.option("--output", default=None, help="Output filename (default: exports/trending.json under the data dir)")
@click.option("--topic", "topics", multiple=True, help="Topic to include (repeatable; default: all topics)")
@click.option("--limit", type=int, help="Maximum number of tweets to write")
@click.pass_context
def export(ctx: click.Context, output: str | None, topics: tuple[str, ...], limit: int | None) -> None:
    """Write the ranked tweets to a JSON file."""
    try:
        path = export_cmd.run(ctx.obj["config_path"], output, list(topics), limit=limit)
        click.echo(f"✅ Exported trending tweets to {path}")
    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Export command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("status")
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show system status and configuration."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        click.echo(f"📄 Config file: {config_manager.config_path}")

        if config_manager.validate_config():
            click.echo("✅ Configuration is valid")
        else:
            click.echo("❌ Configuration validation failed")
            return

        topics = config_manager.get_available_topics()
        click.echo(f"📚 Available topics: {', '.join(topics)}")

        sources = config_manager.get_enabled_sources()
        click.echo(f"📡 Enabled sources: {len(sources)}")
        for name, source_config in sources.items():
            click.echo(f"   {name}: {source_config['path']}")

    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Error checking status: {exc}", err=True)


if __name__ == "__main__":  # pragma: no cover - script entry
    cli()
