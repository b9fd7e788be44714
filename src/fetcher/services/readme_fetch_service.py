# src/fetcher/services/readme_fetch_service.py
import logging
from urllib.parse import quote

from pydantic import ValidationError

from fetcher.model import ReadmePayload
from fetcher.services.github_client_service import GitHubClientService
from fetcher.utils.base64_utils import decode_base64_text
from readme_api.exceptions import DecodeError

logger = logging.getLogger(__name__)


class ReadmeFetchService:
    """Retrieves a repository's README and decodes it to markdown text."""

    def __init__(self, client: GitHubClientService):
        self.client = client

    async def fetch_readme(self, owner: str, repo: str) -> str:
        path = f"repos/{quote(owner, safe='')}/{quote(repo, safe='')}/readme"
        data = await self.client.get_json(path)

        try:
            payload = ReadmePayload.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"unexpected README response for {owner}/{repo}: {e}") from e

        if payload.encoding.lower() != "base64":
            raise DecodeError(f"unsupported README encoding '{payload.encoding}' for {owner}/{repo}")

        text = decode_base64_text(payload.content)
        logger.info("Fetched README for %s/%s (%d chars).", owner, repo, len(text))
        return text
