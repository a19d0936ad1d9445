from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from gitlab_api_models.application.models.abstract_model import AbstractModel

if TYPE_CHECKING:
    from gitlab_api_models.infrastructure.client import Client


class User(AbstractModel):
    properties = (
        "id",
        "email",
        "username",
        "name",
        "bio",
        "skype",
        "linkedin",
        "twitter",
        "website_url",
        "blocked",
        "access_level",
        "created_at",
        "extern_uid",
        "provider",
        "state",
        "is_admin",
        "can_create_group",
        "can_create_project",
        "avatar_url",
        "web_url",
        "current_sign_in_at",
        "two_factor_enabled",
    )
    identity = ("id", "username")

    @classmethod
    def from_dict(cls, client: Optional["Client"], data: Mapping[str, Any]) -> "User":
        user = cls(data.get("id"), client)
        return user.hydrate(data)

    def __init__(self, id: Optional[int] = None, client: Optional["Client"] = None):
        super().__init__(client)
        self._set_data("id", id)
