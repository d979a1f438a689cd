"""Command-line interface for Mintpad.

This module provides the CLI commands for running the Mintpad API and
for the offline tools used while preparing a launch.
"""

from typing import NoReturn

import click

from mintpad.core.config import get_settings
from mintpad.core.logging import configure_logging, get_logger
from mintpad.domain.services import (
    CompressionSizeEstimator,
    local_to_utc,
    to_utc_iso,
    utc_to_local,
)


@click.group()
@click.version_option(version="0.1.0", prog_name="Mintpad")
def cli() -> None:
    """Mintpad - mint phase scheduling and launch workflow.

    Settings are loaded from MINTPAD_* environment variables or a .env file.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Mintpad API server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Mintpad server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "mintpad.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("estimate-size")
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.option(
    "--format",
    "image_format",
    type=click.Choice(["webp", "jpg", "jpeg", "png"], case_sensitive=False),
    default="webp",
    show_default=True,
    help="Target image format",
)
@click.option(
    "--quality",
    type=click.FloatRange(0, 100),
    default=80,
    show_default=True,
    help="Encoder quality (ignored for png)",
)
def estimate_size(width: int, height: int, image_format: str, quality: float) -> None:
    """Estimate the compressed size of a WIDTH x HEIGHT image."""
    settings = get_settings()
    try:
        estimate = CompressionSizeEstimator.estimate(width, height, image_format, quality)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    click.echo(
        f"{estimate.format.display_name} {width}x{height}: "
        f"~{estimate.low_kb} KB (up to ~{estimate.high_kb} KB)"
    )
    if estimate.exceeds_limit(settings.inscription_size_limit_kb):
        click.echo(
            f"Warning: may exceed the {settings.inscription_size_limit_kb} KB inscription limit",
            err=True,
        )


@cli.command("convert-time")
@click.argument("value")
@click.option(
    "--timezone",
    "tz",
    default=None,
    help="IANA zone name (defaults to MINTPAD_DEFAULT_TIMEZONE)",
)
@click.option(
    "--to-local",
    is_flag=True,
    default=False,
    help="Convert a UTC instant to wall-clock time instead",
)
def convert_time(value: str, tz: str | None, to_local: bool) -> None:
    """Convert a YYYY-MM-DDTHH:MM wall-clock VALUE to UTC, or back."""
    tz = tz or get_settings().default_timezone
    try:
        if to_local:
            result = utc_to_local(value, tz)
        else:
            instant = local_to_utc(value, tz)
            result = to_utc_iso(instant) if instant else ""
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    if not result:
        raise click.BadParameter(f"Could not convert '{value}'")
    click.echo(result)


@cli.command()
def info() -> None:
    """Display Mintpad configuration."""
    settings = get_settings()

    click.echo(f"""
Mintpad v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Launchpad:
  Admin wallets:     {len(settings.admin_wallets)}
  Wallet header:     {settings.wallet_header}
  Max per tx:        {settings.max_per_transaction}
  Inscription limit: {settings.inscription_size_limit_kb} KB
  Default timezone:  {settings.default_timezone}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
