"""The fetch → parse → resolve → aggregate pipeline."""

import logging

from ruby_version_checker.core.aggregate import latest_per_minor
from ruby_version_checker.core.checksums import resolve_releases
from ruby_version_checker.core.context import RubyContext
from ruby_version_checker.core.index import collect_candidates, fetch_index
from ruby_version_checker.core.types import ReleaseCatalog

logger = logging.getLogger(__name__)


def build_catalog(ctx: RubyContext) -> ReleaseCatalog:
    """Discover the latest Ruby release of every minor line.

    Args:
        ctx: Context providing the HTTP client and run configuration

    Returns:
        Catalog with one entry per minor line that has at least one release
        with verified checksums (possibly empty)

    Raises:
        FetchError: If the release index cannot be fetched or parsed
    """
    entries = fetch_index(ctx.http, ctx.config.index_url)
    candidates = collect_candidates(entries)
    releases = resolve_releases(ctx.http, candidates, ctx.config.max_workers)
    catalog = latest_per_minor(releases)
    logger.info("Catalog holds %d minor lines", len(catalog))
    return catalog
