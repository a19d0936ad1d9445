from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from gitlab_api_models.application.models.abstract_model import AbstractModel
from gitlab_api_models.application.models.merge_request import MergeRequest
from gitlab_api_models.application.models.user import User

if TYPE_CHECKING:
    from gitlab_api_models.infrastructure.client import Client


class Project(AbstractModel):
    properties = (
        "id",
        "name",
        "name_with_namespace",
        "description",
        "path",
        "path_with_namespace",
        "default_branch",
        "web_url",
        "http_url_to_repo",
        "ssh_url_to_repo",
        "visibility",
        "owner",
        "namespace",
        "created_at",
        "last_activity_at",
        "archived",
        "open_issues_count",
    )
    identity = ("id", "path_with_namespace")

    @classmethod
    def from_dict(cls, client: Optional["Client"], data: Mapping[str, Any]) -> "Project":
        project = cls(data.get("id"), client)
        data = dict(data)

        if data.get("owner") is not None:
            data["owner"] = User.from_dict(client, data["owner"])

        return project.hydrate(data)

    def __init__(self, id: Union[int, str, None] = None, client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("id", id)

    def show(self) -> "Project":
        data = self.api("projects").show(self._require("id"))
        return Project.from_dict(self.client, data)

    def merge_request(self, iid: int) -> MergeRequest:
        return MergeRequest(self, iid, self.client).show()

    def merge_requests(self, state: Optional[str] = None, params: Optional[Dict[str, Any]] = None) -> List[MergeRequest]:
        query = dict(params or {})
        if state is not None:
            query["state"] = state
        data = self.api("merge_requests").all(self._require("id"), query)
        return [MergeRequest.from_dict(self.client, self, mr) for mr in data]

    def create_merge_request(
        self,
        source: str,
        target: str,
        title: str,
        assignee_id: Optional[int] = None,
        description: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> MergeRequest:
        data = self.api("merge_requests").create(
            self._require("id"),
            source,
            target,
            title,
            assignee_id=assignee_id,
            description=description,
            params=params,
        )
        return MergeRequest.from_dict(self.client, self, data)
