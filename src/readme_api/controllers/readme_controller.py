# src/readme_api/controllers/readme_controller.py
import asyncio
import logging
import re
from typing import Callable, List, Optional, Tuple

from fetcher.model import RepositoryInfo
from fetcher.services.github_client_service import GitHubClientService
from fetcher.services.metadata_fetch_service import MetadataFetchService
from fetcher.services.readme_fetch_service import ReadmeFetchService
from flattener.dom.core import Element
from flattener.services.markdown_render_service import MarkdownRenderService
from readme_api.core.utils.config_loader import AppConfig
from readme_api.exceptions import DeadlineExceededError, RequestValidationError
from readme_api.model import Document, Metadata

logger = logging.getLogger(__name__)

# GitHub owner and repository names: letters, digits, '-', '_' and '.'
IDENTIFIER_RE = re.compile(r'^[A-Za-z0-9_.-]{1,100}$')


def validate_identifiers(owner: Optional[str], repo: Optional[str]) -> Tuple[str, str]:
    """
    Checks the owner/repo pair supplied by a caller.

    Raises:
        RequestValidationError: If either value is missing or malformed.
    """
    owner = (owner or "").strip()
    repo = (repo or "").strip()
    if not owner or not repo:
        raise RequestValidationError("Missing required parameters: owner and repo")
    for label, value in (("owner", owner), ("repo", repo)):
        if not IDENTIFIER_RE.match(value) or value in (".", ".."):
            raise RequestValidationError(f"Invalid {label}: {value!r}")
    return owner, repo


class ReadmeController:
    """
    Orchestrates one README request: the README branch (fetch, render,
    flatten) and the metadata fetch run concurrently under a single
    deadline, then the Document is assembled. Any failure aborts the whole
    request.
    """

    def __init__(
            self,
            config: AppConfig,
            render_service: Optional[MarkdownRenderService] = None,
            client_factory: Optional[Callable[[AppConfig], GitHubClientService]] = None
    ):
        self.config = config
        self.render_service = render_service or MarkdownRenderService()
        self.client_factory = client_factory or GitHubClientService
        self.deadline = float(config.request_timeout)

    def build_document(self, owner: Optional[str], repo: Optional[str]) -> Document:
        """Synchronous entry point used by the Flask routes and the CLI."""
        return asyncio.run(self.build_document_async(owner, repo))

    async def build_document_async(self, owner: Optional[str], repo: Optional[str]) -> Document:
        owner, repo = validate_identifiers(owner, repo)

        async with self.client_factory(self.config) as client:
            readme_service = ReadmeFetchService(client)
            metadata_service = MetadataFetchService(client)
            try:
                (raw_markdown, elements), info = await asyncio.wait_for(
                    self._gather_or_cancel(
                        self._readme_branch(readme_service, owner, repo),
                        metadata_service.fetch_repository(owner, repo)
                    ),
                    timeout=self.deadline
                )
            except asyncio.TimeoutError as e:
                raise DeadlineExceededError(
                    f"deadline of {self.deadline:.1f}s exceeded for {owner}/{repo}"
                ) from e

        return self._assemble(info, elements, raw_markdown)

    async def _readme_branch(
            self, readme_service: ReadmeFetchService, owner: str, repo: str
    ) -> Tuple[str, List[Element]]:
        raw_markdown = await readme_service.fetch_readme(owner, repo)
        return raw_markdown, self.render_service.render_elements(raw_markdown)

    @staticmethod
    async def _gather_or_cancel(*coros):
        """Runs coroutines concurrently; the first failure cancels the rest."""
        tasks = [asyncio.ensure_future(coro) for coro in coros]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    @staticmethod
    def _assemble(info: RepositoryInfo, elements: List[Element], raw_markdown: str) -> Document:
        return Document(
            metadata=Metadata.from_repository(info),
            content=elements,
            raw_content=raw_markdown
        )
