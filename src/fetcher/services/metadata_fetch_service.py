# src/fetcher/services/metadata_fetch_service.py
import logging
from urllib.parse import quote

from pydantic import ValidationError

from fetcher.model import RepositoryInfo
from fetcher.services.github_client_service import GitHubClientService
from readme_api.exceptions import DecodeError

logger = logging.getLogger(__name__)


class MetadataFetchService:
    """Retrieves the repository record (name, description, owner, timestamps)."""

    def __init__(self, client: GitHubClientService):
        self.client = client

    async def fetch_repository(self, owner: str, repo: str) -> RepositoryInfo:
        data = await self.client.get_json(f"repos/{quote(owner, safe='')}/{quote(repo, safe='')}")
        try:
            info = RepositoryInfo.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"unexpected repository response for {owner}/{repo}: {e}") from e

        logger.info("Fetched metadata for %s (updated %s).", info.full_name, info.updated_at.isoformat())
        return info
