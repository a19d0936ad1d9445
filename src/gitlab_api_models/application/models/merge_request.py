from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from gitlab_api_models.application.exceptions.model_error import MissingIdentifierError
from gitlab_api_models.application.models.abstract_model import AbstractModel
from gitlab_api_models.application.models.file import File
from gitlab_api_models.application.models.file_diff import FileDiff
from gitlab_api_models.application.models.milestone import Milestone
from gitlab_api_models.application.models.note import Note
from gitlab_api_models.application.models.noteable import Noteable
from gitlab_api_models.application.models.user import User
from gitlab_api_models.infrastructure.observability.logger_factory_service import build_logger

if TYPE_CHECKING:
    from gitlab_api_models.application.models.project import Project
    from gitlab_api_models.infrastructure.client import Client

logger = build_logger(__name__)

CLOSED_STATES = ("closed", "merged")


class MergeRequest(AbstractModel, Noteable):
    """A merge request of one project.

    Every operation performs a single call under
    ``projects/:id/merge_requests/:iid`` and returns a freshly hydrated
    instance; ``self`` is never mutated. ``merged`` and ``changes`` are both
    payload fields and methods, so read their values with ``mr["merged"]``
    and ``mr["changes"]`` (or the ``file_diffs`` shortcut).
    """

    properties = (
        "id",
        "iid",
        "target_branch",
        "source_branch",
        "project_id",
        "title",
        "description",
        "closed",
        "merged",
        "author",
        "assignee",
        "project",
        "state",
        "source_project_id",
        "target_project_id",
        "upvotes",
        "downvotes",
        "labels",
        "milestone",
        "files",
        "changes",
        "web_url",
        "sha",
        "merge_status",
        "created_at",
        "updated_at",
    )
    identity = ("iid", "title")
    bound = ("project",)

    @classmethod
    def from_dict(cls, client: Optional["Client"], project: "Project", data: Mapping[str, Any]) -> "MergeRequest":
        mr = cls(project, data.get("iid"), client)
        data = dict(data)

        if data.get("author") is not None:
            data["author"] = User.from_dict(client, data["author"])

        if data.get("assignee") is not None:
            data["assignee"] = User.from_dict(client, data["assignee"])

        if data.get("milestone") is not None:
            data["milestone"] = Milestone.from_dict(client, project, data["milestone"])

        if data.get("files") is not None:
            data["files"] = [File.from_dict(client, project, file) for file in data["files"]]

        if data.get("changes") is not None:
            data["changes"] = [FileDiff.from_dict(client, project, change) for change in data["changes"]]

        return mr.hydrate(data)

    def __init__(self, project: "Project", iid: Optional[int] = None, client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("project", project)
        self._set_data("iid", iid)

    def _refresh(self, data: Mapping[str, Any]) -> "MergeRequest":
        return MergeRequest.from_dict(self.client, self.project, data)

    def _path_ids(self) -> tuple:
        if self.project is None:
            raise MissingIdentifierError(type(self).__name__, "project")
        return self.project._require("id"), self._require("iid")

    @property
    def file_diffs(self) -> List[FileDiff]:
        return self.get("changes") or []

    def show(self) -> "MergeRequest":
        data = self.api("merge_requests").show(*self._path_ids())
        return self._refresh(data)

    def update(self, params: Dict[str, Any]) -> "MergeRequest":
        data = self.api("merge_requests").update(*self._path_ids(), params)
        return self._refresh(data)

    def close(self, comment: Optional[str] = None) -> "MergeRequest":
        if comment:
            self.add_comment(comment)

        return self.update({"state_event": "close"})

    def reopen(self) -> "MergeRequest":
        return self.update({"state_event": "reopen"})

    def open(self) -> "MergeRequest":
        return self.reopen()

    def merge(self, message: Optional[str] = None) -> "MergeRequest":
        data = self.api("merge_requests").merge(
            *self._path_ids(), {"merge_commit_message": message}
        )
        return self._refresh(data)

    def merged(self) -> "MergeRequest":
        return self.update({"state_event": "merge"})

    def add_comment(self, body: str) -> Note:
        data = self.api("merge_requests").add_note(*self._path_ids(), body)
        return Note.from_dict(self.client, self, data)

    def show_comments(self) -> List[Note]:
        data = self.api("merge_requests").show_notes(*self._path_ids())
        return [Note.from_dict(self.client, self, note) for note in data]

    def is_closed(self) -> bool:
        return self.state in CLOSED_STATES

    def changes(self) -> "MergeRequest":
        data = self.api("merge_requests").changes(*self._path_ids())
        return self._refresh(data)

    def commits(self) -> List[Dict[str, Any]]:
        return self.api("merge_requests").commits(*self._path_ids())

    def subscribe(self) -> "MergeRequest":
        data = self.api("merge_requests").subscribe(*self._path_ids())

        # 304 when already subscribed
        if not data:
            logger.info(f"Already subscribed to MR !{self.iid}")
            return self
        return self._refresh(data)

    def unsubscribe(self) -> "MergeRequest":
        data = self.api("merge_requests").unsubscribe(*self._path_ids())

        # 304 when not subscribed
        if not data:
            logger.info(f"Not subscribed to MR !{self.iid}")
            return self
        return self._refresh(data)
