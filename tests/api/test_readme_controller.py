# tests/api/test_readme_controller.py
import asyncio
import base64
from unittest.mock import MagicMock, patch

import pytest

from readme_api.controllers.readme_controller import ReadmeController, validate_identifiers
from readme_api.core.utils.config_loader import AppConfig
from readme_api.exceptions import DeadlineExceededError, FetchError, RequestValidationError

README_MD = "## Install\n\nRun `pip install demo`.\n"

REPO_JSON = {
    "name": "demo",
    "full_name": "octo/demo",
    "description": "",
    "updated_at": "2026-03-04T05:06:07+02:00",
    "owner": {"login": "octo"},
}


class FakeClient:
    """Replaces GitHubClientService; serves canned JSON per API path."""

    def __init__(self, responses, delay=0.0):
        self.responses = responses
        self.delay = delay
        self.paths = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    async def get_json(self, path):
        self.paths.append(path)
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self.responses[path]
        if isinstance(result, Exception):
            raise result
        return result


def readme_json(text):
    return {"content": base64.b64encode(text.encode()).decode(), "encoding": "base64"}


@pytest.fixture
def config():
    return AppConfig(github_token="t", request_timeout=2.0)


def make_controller(config, client):
    return ReadmeController(config, client_factory=lambda cfg: client)


def test_build_document_assembles_all_parts(config):
    client = FakeClient({
        "repos/octo/demo/readme": readme_json(README_MD),
        "repos/octo/demo": REPO_JSON,
    })
    document = make_controller(config, client).build_document("octo", "demo")

    assert document.raw_content == README_MD
    assert document.metadata.repository == "octo/demo"
    # empty description falls back to the repository name
    assert document.metadata.title == "demo"
    assert document.metadata.author == "octo"
    assert [e.type for e in document.content] == ["heading", "paragraph"]
    assert document.content[0].attributes.level == "2"
    assert sorted(client.paths) == ["repos/octo/demo", "repos/octo/demo/readme"]
    assert client.closed


def test_document_json_shape(config):
    client = FakeClient({
        "repos/octo/demo/readme": readme_json(README_MD),
        "repos/octo/demo": REPO_JSON,
    })
    payload = make_controller(config, client).build_document("octo", "demo").to_dict()

    assert set(payload) == {"metadata", "content", "rawContent"}
    assert payload["metadata"] == {
        "title": "demo",
        "repository": "octo/demo",
        "lastUpdated": "2026-03-04T03:06:07Z",
        "author": "octo",
        "description": "",
    }


def test_collaborator_failure_aborts(config):
    client = FakeClient({
        "repos/octo/demo/readme": readme_json(README_MD),
        "repos/octo/demo": FetchError("API request failed with status code: 500", status=500),
    })
    with pytest.raises(FetchError):
        make_controller(config, client).build_document("octo", "demo")
    assert client.closed


def test_deadline_exceeded():
    config = AppConfig(github_token="t", request_timeout=0.05)
    client = FakeClient({
        "repos/octo/demo/readme": readme_json(README_MD),
        "repos/octo/demo": REPO_JSON,
    }, delay=1.0)
    with pytest.raises(DeadlineExceededError):
        make_controller(config, client).build_document("octo", "demo")


@pytest.mark.parametrize("owner, repo", [(None, "r"), ("o", None), ("", ""), ("  ", "r")])
def test_missing_identifiers(owner, repo):
    with pytest.raises(RequestValidationError):
        validate_identifiers(owner, repo)


@pytest.mark.parametrize("owner, repo", [("a/b", "r"), ("o", "../etc"), ("o", ".."), ("o", "r?x=1")])
def test_malformed_identifiers(owner, repo):
    with pytest.raises(RequestValidationError):
        validate_identifiers(owner, repo)


def test_valid_identifiers_are_trimmed():
    assert validate_identifiers(" octo ", "demo.js") == ("octo", "demo.js")


def test_identifiers_are_validated_once(config):
    client = FakeClient({
        "repos/octo/demo/readme": readme_json(README_MD),
        "repos/octo/demo": REPO_JSON,
    })
    with patch("readme_api.controllers.readme_controller.validate_identifiers",
               wraps=validate_identifiers) as mock_validate:
        make_controller(config, client).build_document(" octo ", "demo")

    mock_validate.assert_called_once_with(" octo ", "demo")
    assert sorted(client.paths) == ["repos/octo/demo", "repos/octo/demo/readme"]


def test_sync_entry_point_rejects_missing_identifiers(config):
    factory = MagicMock()
    with pytest.raises(RequestValidationError):
        ReadmeController(config, client_factory=factory).build_document("octo", None)
    factory.assert_not_called()
