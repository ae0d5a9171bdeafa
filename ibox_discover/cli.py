"""CLI entry point for iBox device discovery.

    ibox-discover [--timeout SEC] [--format text|json] [options]
    python -m ibox_discover.cli [options]

Records go to stdout; logging goes to stderr.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import (
    ConfigError,
    DiscoveryConfig,
    DuplicatePolicy,
    ensure_valid,
    load_config,
    merge_overrides,
)
from .discovery import DiscoverySession
from .reporting import JsonReporter, format_devices

logger = logging.getLogger(__name__)

EXIT_SETUP_FAILURE = 1
EXIT_USAGE = 2

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr at the requested verbosity."""
    level = logging.INFO
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def build_config(config_path: Optional[str], **overrides) -> DiscoveryConfig:
    """Load the optional config file and apply command-line overrides.

    Raises:
        ConfigError: If the file is unreadable or the merged config is invalid.
    """
    config = load_config(config_path) if config_path else DiscoveryConfig()
    config = merge_overrides(config, **overrides)

    validation = ensure_valid(config)
    for warning in validation.warnings:
        logger.warning(f"{warning.path}: {warning.message}")
    return config


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--timeout", type=float, help="Listen window in seconds (default: 5).")
@click.option("--port", type=int, help="iBox UDP port (default: 9999).")
@click.option("--bind", "bind_address", help="Local IPv4 address to bind (default: all).")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="YAML config file.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]), default="text", show_default=True,
    help="Output format.",
)
@click.option("--save-report", type=click.Path(dir_okay=False), help="Also save a JSON report to this path.")
@click.option(
    "--duplicates",
    type=click.Choice([p.value for p in DuplicatePolicy]),
    help="Keep every reply, or one per hardware address.",
)
@click.option("--query-size", type=int, help="Zero-pad the query datagram to this many bytes.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option("--quiet", is_flag=True, help="Only log warnings and errors.")
def main(
    timeout, port, bind_address, config_path, output_format,
    save_report, duplicates, query_size, debug, quiet,
):
    """Discover iBox devices on the local network."""
    configure_logging(debug=debug, quiet=quiet)

    try:
        config = build_config(
            config_path,
            timeout=timeout,
            port=port,
            bind_address=bind_address,
            duplicates=duplicates,
            query_size=query_size,
        )
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_USAGE)

    result = DiscoverySession(config).run()

    reporter = JsonReporter()
    report = None
    if output_format == "json" or save_report:
        report = reporter.generate(result, config)

    if output_format == "json":
        click.echo(reporter.to_json_string(report))
    elif result.devices:
        click.echo(format_devices(result.devices))

    if save_report:
        try:
            saved_path = reporter.save(report, Path(save_report))
            logger.info(f"Report saved: {saved_path}")
        except OSError as e:
            logger.warning(f"Failed to save report: {e}")

    logger.info(f"Discovery finished: {result}")

    if result.aborted:
        sys.exit(EXIT_SETUP_FAILURE)


if __name__ == "__main__":
    main()
