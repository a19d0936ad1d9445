from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from gitlab_api_models.application.models.abstract_model import AbstractModel

if TYPE_CHECKING:
    from gitlab_api_models.application.models.project import Project
    from gitlab_api_models.infrastructure.client import Client


class File(AbstractModel):
    properties = (
        "project",
        "file_path",
        "file_name",
        "branch_name",
        "ref",
        "content",
        "encoding",
        "size",
        "blob_id",
        "commit_id",
        "last_commit_id",
    )
    identity = ("file_path",)
    bound = ("project",)

    @classmethod
    def from_dict(cls, client: Optional["Client"], project: "Project", data: Mapping[str, Any]) -> "File":
        file = cls(project, data.get("file_path"), client)
        return file.hydrate(data)

    def __init__(self, project: "Project", file_path: Optional[str] = None, client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("project", project)
        self._set_data("file_path", file_path)
