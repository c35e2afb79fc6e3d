"""ngfetch CLI - Main entry point."""

import logging
from pathlib import Path

import click

from ngfetch import __version__

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

_handler = None


def _setup_logging(verbose: bool) -> None:
    """Configure a stderr handler on the package logger."""
    global _handler

    pkg_logger = logging.getLogger("ngfetch")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # One handler per process, even across repeated invocations
    if _handler is not None:
        pkg_logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    pkg_logger.addHandler(_handler)


@click.command()
@click.version_option(version=__version__, prog_name="ngfetch")
@click.option("--no-ascii", is_flag=True, help="Disable ASCII art display")
@click.option("--no-colors", is_flag=True, help="Disable colored output")
@click.option("--art", default=None, help="Bundled art name or path to an art file")
@click.option("--list-art", is_flag=True, help="List bundled ASCII art and exit")
@click.option(
    "--layout",
    type=click.Choice(["boxed", "plain"]),
    default=None,
    help="Report layout",
)
@click.option("--width", type=click.IntRange(min=10), default=None, help="Boxed layout width")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML config file",
)
@click.option("--verbose", is_flag=True, help="Show debug logging")
def cli(no_ascii, no_colors, art, list_art, layout, width, config_path, verbose):
    """ngfetch - host facts and installed toolchains at a glance."""
    from ngfetch.ascii.art import list_bundled_art, print_ascii_art
    from ngfetch.collectors.system_info import CollectionError, HostMetricsProvider
    from ngfetch.config.loader import ConfigError, load_fetch_config
    from ngfetch.render.report import ReportRenderer
    from ngfetch.render.style import RED, StylePolicy
    from ngfetch.toolchains.detector import ToolchainDetector
    from ngfetch.toolchains.runner import CommandRunner

    _setup_logging(verbose)

    if list_art:
        for name in list_bundled_art():
            click.echo(name)
        return

    try:
        config = load_fetch_config(config_path)
    except ConfigError as e:
        style = StylePolicy(enabled=not no_colors)
        style.make_console(stderr=True).print(style.styled(str(e), RED), soft_wrap=True)
        raise SystemExit(1)

    display = config.display
    style = StylePolicy(enabled=display.colors and not no_colors)
    console = style.make_console()

    try:
        snapshot = HostMetricsProvider(disk_path=config.collection.disk_path).collect()
    except CollectionError as e:
        err_console = style.make_console(stderr=True)
        err_console.print(
            style.styled(f"Error collecting system information: {e}", RED), soft_wrap=True
        )
        raise SystemExit(1)

    runner = CommandRunner(timeout=config.collection.probe_timeout_s)
    toolchains = ToolchainDetector(runner).detect(config.toolchains)
    logger.debug(f"Detected {len(toolchains)} of {len(config.toolchains)} toolchains")

    if display.ascii and not no_ascii:
        print_ascii_art(console, art or display.ascii_art)

    renderer = ReportRenderer(
        console,
        style,
        layout=layout or display.layout,
        total_width=width or display.total_width,
    )
    renderer.render(snapshot, toolchains)


if __name__ == "__main__":
    cli()
