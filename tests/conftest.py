from unittest.mock import MagicMock

import pytest

from gitlab_api_models.application.models.project import Project
from gitlab_api_models.infrastructure.client import Client
from gitlab_api_models.infrastructure.configuration.gitlab_settings import GitLabSettings

GITLAB_URL = "https://gitlab.example.com"
API_ROOT = f"{GITLAB_URL}/api/v4"


@pytest.fixture
def settings():
    return GitLabSettings(
        base_url=GITLAB_URL + "/",
        token="mock_gl_token",
        timeout_seconds=5.0,
    )


@pytest.fixture
def client(settings):
    return Client(settings)


@pytest.fixture
def mr_api():
    return MagicMock()


@pytest.fixture
def mock_client(mr_api):
    # Every api(name) lookup resolves to the same mocked endpoint group
    client = MagicMock()
    client.api.return_value = mr_api
    return client


@pytest.fixture
def project(mock_client):
    return Project(42, mock_client)


@pytest.fixture
def mr_payload():
    return {
        "id": 1001,
        "iid": 7,
        "project_id": 42,
        "title": "Add login form",
        "description": "Implements the login form",
        "state": "opened",
        "source_branch": "feature/login",
        "target_branch": "main",
        "source_project_id": 42,
        "target_project_id": 42,
        "upvotes": 2,
        "downvotes": 0,
        "labels": ["frontend", "review"],
        "web_url": f"{GITLAB_URL}/group/app/-/merge_requests/7",
        "author": {"id": 5, "username": "ana", "name": "Ana Torres", "state": "active"},
        "assignee": {"id": 6, "username": "luis", "name": "Luis Mora"},
        "milestone": {"id": 3, "iid": 1, "project_id": 42, "title": "v1.0", "state": "active"},
        "user_notes_count": 4,
    }
