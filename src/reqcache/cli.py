"""Click CLI for reqcache — compute and match cache keys."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from reqcache.cache.keys import build_cache_key
from reqcache.cache.matching import get_matched_keys
from reqcache.cache.rearrange import rearrange_url
from reqcache.config.loader import load_service_config
from reqcache.errors.exceptions import ConfigError
from reqcache.types import CacheServiceConfig, CleanQueryOptions

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _parse_pairs(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Turn repeated ``key=value`` options into a dict."""
    result: dict[str, str] = {}
    for item in values:
        key, eq, value = item.partition("=")
        if not eq or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}", ctx=ctx, param=param)
        result[key] = value
    return result


def _load_config(config_path: str | None, **overrides: object) -> CacheServiceConfig:
    try:
        return load_service_config(config_path, **overrides)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="reqcache")
def cli() -> None:
    """reqcache — canonical cache keys for client-side HTTP caches."""


@cli.command()
@click.argument("url")
@click.option(
    "-d", "--default-param", "default_params", multiple=True, callback=_parse_pairs,
    help="Default query param (key=value), lowest precedence.",
)
@click.option(
    "-p", "--param", "params", multiple=True, callback=_parse_pairs,
    help="Explicit query param (key=value).",
)
@click.option("--uid", type=str, default=None, help="Unique identifier namespace.")
@click.option(
    "--params-overwrite/--url-wins", default=None,
    help="Whether explicit params beat URL query params.",
)
@click.option("--config", "config_path", type=click.Path(exists=True), help="Config YAML file.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def key(
    url: str,
    default_params: dict[str, str],
    params: dict[str, str],
    uid: str | None,
    params_overwrite: bool | None,
    config_path: str | None,
    verbose: int,
) -> None:
    """Print the cache key for URL."""
    _setup_logging(verbose)
    config = _load_config(config_path, params_object_overwrites=params_overwrite)

    canonical = rearrange_url(
        url,
        default_params=default_params or None,
        params=params or None,
        strategy=config.strategy,
    )
    logger.info("Canonical URL (%s): %s", config.strategy.value, canonical)
    click.echo(build_cache_key(canonical, uid, config.uid_separator))


@cli.command()
@click.argument("keys_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("url")
@click.option("--uid", type=str, default=None, help="Unique identifier namespace.")
@click.option("--exact", is_flag=True, default=False, help="Require full key equality.")
@click.option(
    "-q", "--query-param", "query_params", multiple=True, callback=_parse_pairs,
    help="Lookup query param (key=value).",
)
@click.option(
    "--params-overwrite/--url-wins", default=None,
    help="Whether explicit params beat URL query params.",
)
@click.option("--config", "config_path", type=click.Path(exists=True), help="Config YAML file.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def match(
    keys_file: str,
    url: str,
    uid: str | None,
    exact: bool,
    query_params: dict[str, str],
    params_overwrite: bool | None,
    config_path: str | None,
    verbose: int,
) -> None:
    """Match URL against the cache keys listed in KEYS_FILE (one per line)."""
    _setup_logging(verbose)
    config = _load_config(config_path, params_object_overwrites=params_overwrite)

    lines = Path(keys_file).read_text(encoding="utf-8").splitlines()
    source = dict.fromkeys(line.strip() for line in lines if line.strip())
    logger.info("Loaded %d keys from %s", len(source), keys_file)

    matches = get_matched_keys(
        source,
        url,
        unique_identifier=uid,
        options=CleanQueryOptions(exact=exact, query_params=query_params or None),
        strategy=config.strategy,
        separator=config.uid_separator,
    )

    if not matches:
        error_console.print("[yellow]No matching keys.[/yellow]")
        sys.exit(1)

    table = Table(title="Matched Keys", show_header=True)
    table.add_column("#", style="cyan")
    table.add_column("Key", overflow="fold")
    for i, matched in enumerate(matches, 1):
        table.add_row(str(i), matched)
    console.print(table)


@cli.command("config")
@click.option("--config", "config_path", type=click.Path(exists=True), help="Config YAML file.")
def show_config(config_path: str | None) -> None:
    """Show the resolved configuration."""
    config = _load_config(config_path)

    table = Table(title="Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in config.model_dump().items():
        table.add_row(name, str(value))
    table.add_row("strategy", config.strategy.value)

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
