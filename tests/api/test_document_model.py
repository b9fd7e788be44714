# tests/api/test_document_model.py
import json
from datetime import datetime, timezone

from fetcher.model import RepositoryInfo
from flattener.dom.core import Element, ElementAttributes, ElementType
from readme_api.model import Document, Metadata


def repo_info(**overrides):
    data = {
        "name": "demo",
        "full_name": "octo/demo",
        "description": "Demo project",
        "updated_at": "2026-05-06T07:08:09Z",
        "owner": {"login": "octo"},
    }
    data.update(overrides)
    return RepositoryInfo.model_validate(data)


def test_title_prefers_description():
    metadata = Metadata.from_repository(repo_info())
    assert metadata.title == "Demo project"
    assert metadata.description == "Demo project"


def test_title_falls_back_to_name():
    assert Metadata.from_repository(repo_info(description=None)).title == "demo"
    assert Metadata.from_repository(repo_info(description="   ")).title == "demo"


def test_last_updated_is_normalized_to_utc():
    metadata = Metadata.from_repository(repo_info(updated_at="2026-05-06T09:08:09+02:00"))
    assert metadata.last_updated == datetime(2026, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    assert metadata.model_dump(mode="json", by_alias=True)["lastUpdated"] == "2026-05-06T07:08:09Z"


def test_naive_timestamp_is_treated_as_utc():
    metadata = Metadata.from_repository(repo_info(updated_at="2026-05-06T07:08:09"))
    assert metadata.last_updated.tzinfo == timezone.utc


def test_document_serialization_omits_unset_keys():
    document = Document(
        metadata=Metadata.from_repository(repo_info()),
        content=[
            Element(type=ElementType.IMAGE, attributes=ElementAttributes(src="a.png")),
            Element(type=ElementType.PARAGRAPH, children=[]),
        ],
        raw_content="![](a.png)",
    )
    payload = json.loads(document.to_json())

    assert payload["content"] == [
        {"type": "image", "attributes": {"src": "a.png"}},
        {"type": "paragraph", "children": []},
    ]
    assert payload["rawContent"] == "![](a.png)"
    assert payload == document.to_dict()
