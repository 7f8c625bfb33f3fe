import logging

import click

from ruby_version_checker.cli.json_output import emit_catalog
from ruby_version_checker.cli.output import error_message, user_output
from ruby_version_checker.core.config import (
    DEFAULT_INDEX_URL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT_SECONDS,
    INDEX_URL_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    CheckerConfig,
    validate_index_url,
)
from ruby_version_checker.core.context import RubyContext, create_context
from ruby_version_checker.core.errors import FetchError
from ruby_version_checker.core.pipeline import build_catalog

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

LOG_LEVELS = ["debug", "info", "warning", "error"]
LOG_FORMAT = "[%(levelname)s %(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr at the requested level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def _index_url_callback(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        return validate_index_url(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ruby-version-checker")
@click.option(
    "--index-url",
    envvar=INDEX_URL_ENV_VAR,
    default=DEFAULT_INDEX_URL,
    show_default=True,
    callback=_index_url_callback,
    help=f"Release index to read (env: {INDEX_URL_ENV_VAR}).",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help=f"Diagnostic detail written to stderr (env: {LOG_LEVEL_ENV_VAR}).",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    help="Maximum concurrent checksum lookups.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="Per-request timeout in seconds.",
)
@click.pass_context
def cli(ctx: click.Context, index_url: str, log_level: str, workers: int, timeout: float) -> None:
    """Print the latest Ruby release of every minor version line as JSON.

    The document maps "<major>.<minor>" to the selected version, its download
    URLs and their SHA-256 checksums. Nothing is written to stdout unless the
    whole catalog was built.
    """
    configure_logging(log_level)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        config = CheckerConfig(index_url=index_url, max_workers=workers, timeout_seconds=timeout)
        ctx.obj = create_context(config)
    run_ctx: RubyContext = ctx.obj

    try:
        catalog = build_catalog(run_ctx)
    except FetchError as e:
        logger.debug("Fetch failed", exc_info=True)
        user_output(error_message(str(e)))
        raise SystemExit(1) from e
    finally:
        run_ctx.http.close()

    try:
        emit_catalog(catalog)
    except OSError as e:
        user_output(error_message(f"Failed to write catalog: {e}"))
        raise SystemExit(1) from e


def main() -> None:
    """CLI entry point used by the `ruby-version-checker` console script."""
    cli()
