from __future__ import annotations

import urllib.parse
from typing import Any, Optional, Union

from gitlab_api_models.infrastructure.http.gitlab_http_client import GitLabHttpClient

ProjectRef = Union[int, str]


class AbstractApi:
    """Base for endpoint groups; builds resource paths and drops None params."""

    def __init__(self, http: GitLabHttpClient):
        self.http = http

    @staticmethod
    def encode_path(value: ProjectRef) -> str:
        # "group/project" must travel as one path segment
        return urllib.parse.quote(str(value), safe="")

    def project_path(self, project_id: ProjectRef, suffix: str = "") -> str:
        path = f"projects/{self.encode_path(project_id)}"
        return f"{path}/{suffix.lstrip('/')}" if suffix else path

    @staticmethod
    def clean_params(params: Optional[dict[str, Any]]) -> dict[str, Any]:
        return {key: value for key, value in (params or {}).items() if value is not None}
