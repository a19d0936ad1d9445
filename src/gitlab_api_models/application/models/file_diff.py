from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from gitlab_api_models.application.models.abstract_model import AbstractModel

if TYPE_CHECKING:
    from gitlab_api_models.application.models.project import Project
    from gitlab_api_models.infrastructure.client import Client


class FileDiff(AbstractModel):
    """One entry of the ``changes`` list of a merge request."""

    properties = (
        "project",
        "old_path",
        "new_path",
        "a_mode",
        "b_mode",
        "diff",
        "new_file",
        "renamed_file",
        "deleted_file",
    )
    identity = ("old_path", "new_path")
    bound = ("project",)

    @classmethod
    def from_dict(cls, client: Optional["Client"], project: "Project", data: Mapping[str, Any]) -> "FileDiff":
        return cls(project, client).hydrate(data)

    def __init__(self, project: "Project", client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("project", project)

    @property
    def path(self) -> Optional[str]:
        return self.new_path or self.old_path
