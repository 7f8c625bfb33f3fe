"""Pydantic models for the catalog JSON document.

These models validate the emitted structure at runtime, so a bug upstream of
the serializer cannot produce a document with a malformed version or digest.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Sha256Hex = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{64}$")]


class CatalogEntryModel(BaseModel):
    """JSON schema for one minor line of the catalog.

    Attributes:
        version: Full version of the selected release, e.g. "3.2.2" or "3.4.0-rc1"
        urls: Artifact download URLs in listing order
        checksums: Mapping of artifact URL -> lowercase hex SHA-256
    """

    model_config = ConfigDict(strict=True)

    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+(-[0-9A-Za-z][0-9A-Za-z.]*)?$")
    urls: list[str] = Field(..., min_length=1)
    checksums: dict[str, Sha256Hex] = Field(..., min_length=1)
