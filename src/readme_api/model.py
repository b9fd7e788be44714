# src/readme_api/model.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from fetcher.model import RepositoryInfo
from flattener.dom.core import Element


class Metadata(BaseModel):
    """Repository information shown alongside the rendered README."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    repository: str
    last_updated: datetime = Field(alias="lastUpdated")
    author: str
    description: str = ""

    @field_serializer("last_updated")
    def serialize_last_updated(self, value: datetime) -> str:
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    @classmethod
    def from_repository(cls, info: RepositoryInfo) -> "Metadata":
        """
        Builds metadata from the host's repository record.
        The title is the description when it is non-blank, else the repository name.
        """
        description = (info.description or "").strip()
        updated = info.updated_at
        if updated.tzinfo is None:
            updated = updated.replace(tzinfo=timezone.utc)

        return cls(
            title=description or info.name,
            repository=info.full_name,
            last_updated=updated.astimezone(timezone.utc),
            author=info.owner_login,
            description=description
        )


class Document(BaseModel):
    """
    A README rendered to typed content, plus repository metadata and the
    original markdown source.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: Metadata
    content: List[Element] = Field(default_factory=list)
    raw_content: str = Field(default="", alias="rawContent")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
