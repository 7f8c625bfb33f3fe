"""JSON rendering of the release catalog."""

import json
from typing import Any

from ruby_version_checker.cli.json_schemas import CatalogEntryModel
from ruby_version_checker.cli.output import machine_output
from ruby_version_checker.core.types import ReleaseCatalog


def catalog_to_dict(catalog: ReleaseCatalog) -> dict[str, Any]:
    """Convert a catalog to plain JSON-ready data.

    Each entry is validated through CatalogEntryModel before it is dumped.

    Raises:
        pydantic.ValidationError: If an entry violates the output schema
    """
    return {
        minor: CatalogEntryModel(
            version=entry.version,
            urls=list(entry.urls),
            checksums=dict(entry.checksums),
        ).model_dump(mode="json")
        for minor, entry in catalog.entries.items()
    }


def render_catalog(catalog: ReleaseCatalog) -> str:
    """Render the catalog as an indented JSON object.

    An empty catalog renders as "{}".
    """
    return json.dumps(catalog_to_dict(catalog), indent=2)


def emit_catalog(catalog: ReleaseCatalog) -> None:
    """Write the catalog JSON to stdout via machine_output().

    Raises:
        OSError: If stdout cannot be written
    """
    machine_output(render_catalog(catalog))
