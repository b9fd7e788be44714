# src/fetcher/model.py (Repository host layer)
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RepositoryOwner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str


class RepositoryInfo(BaseModel):
    """Subset of the GitHub repository record the service relies on."""
    model_config = ConfigDict(extra="ignore")

    name: str
    full_name: str
    description: Optional[str] = None
    updated_at: datetime
    owner: RepositoryOwner

    @property
    def owner_login(self) -> str:
        return self.owner.login


class ReadmePayload(BaseModel):
    """The README endpoint response: base64 content plus its encoding name."""
    model_config = ConfigDict(extra="ignore")

    content: str
    encoding: str = "base64"
