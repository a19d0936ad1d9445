from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from gitlab_api_models.application.models.abstract_model import AbstractModel
from gitlab_api_models.application.models.user import User

if TYPE_CHECKING:
    from gitlab_api_models.application.models.noteable import Noteable
    from gitlab_api_models.infrastructure.client import Client


class Note(AbstractModel):
    properties = (
        "id",
        "author",
        "body",
        "created_at",
        "updated_at",
        "parent_type",
        "parent",
        "attachment",
        "system",
        "noteable_id",
        "noteable_type",
        "resolvable",
        "resolved",
    )
    bound = ("parent",)

    @classmethod
    def from_dict(cls, client: Optional["Client"], parent: "Noteable", data: Mapping[str, Any]) -> "Note":
        note = cls(parent, client)
        data = dict(data)

        if data.get("author") is not None:
            data["author"] = User.from_dict(client, data["author"])

        return note.hydrate(data)

    def __init__(self, parent: "Noteable", client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("parent", parent)
        self._set_data("parent_type", type(parent).__name__)
