from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FileMetadata(BaseModel):
    """File record returned by the Drive files endpoint.

    Unknown fields are kept so callers can read anything the remote returns.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    title: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")
    thumbnail_link: str | None = Field(default=None, alias="thumbnailLink")
