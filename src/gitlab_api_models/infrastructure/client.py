from typing import Dict, Optional, Type

from gitlab_api_models.application.exceptions.model_error import InvalidApiNameError
from gitlab_api_models.infrastructure.api.abstract_api import AbstractApi
from gitlab_api_models.infrastructure.api.merge_requests_api import MergeRequestsApi
from gitlab_api_models.infrastructure.api.projects_api import ProjectsApi
from gitlab_api_models.infrastructure.configuration.gitlab_settings import GitLabSettings
from gitlab_api_models.infrastructure.http.gitlab_http_client import GitLabHttpClient

_API_REGISTRY: Dict[str, Type[AbstractApi]] = {
    "merge_requests": MergeRequestsApi,
    "mr": MergeRequestsApi,
    "projects": ProjectsApi,
}


class Client:
    """Entry point handed to every model; resolves API modules by name."""

    def __init__(
        self,
        settings: Optional[GitLabSettings] = None,
        http_client: Optional[GitLabHttpClient] = None,
    ):
        self.settings = settings or GitLabSettings()
        self.http = http_client or GitLabHttpClient(self.settings)
        self._apis: Dict[Type[AbstractApi], AbstractApi] = {}

    def api(self, name: str) -> AbstractApi:
        api_cls = _API_REGISTRY.get(name)
        if api_cls is None:
            raise InvalidApiNameError(name)
        if api_cls not in self._apis:
            self._apis[api_cls] = api_cls(self.http)
        return self._apis[api_cls]

    def merge_requests(self) -> MergeRequestsApi:
        return self.api("merge_requests")

    def projects(self) -> ProjectsApi:
        return self.api("projects")
