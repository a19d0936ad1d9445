from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from gitlab_api_models.application.models.abstract_model import AbstractModel

if TYPE_CHECKING:
    from gitlab_api_models.application.models.project import Project
    from gitlab_api_models.infrastructure.client import Client


class Milestone(AbstractModel):
    properties = (
        "id",
        "iid",
        "project",
        "project_id",
        "title",
        "description",
        "due_date",
        "start_date",
        "state",
        "closed",
        "updated_at",
        "created_at",
        "web_url",
    )
    identity = ("id", "title")
    bound = ("project",)

    @classmethod
    def from_dict(cls, client: Optional["Client"], project: "Project", data: Mapping[str, Any]) -> "Milestone":
        milestone = cls(project, data.get("id"), client)
        return milestone.hydrate(data)

    def __init__(self, project: "Project", id: Optional[int] = None, client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("project", project)
        self._set_data("id", id)
