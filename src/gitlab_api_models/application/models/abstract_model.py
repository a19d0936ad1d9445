"""Base class for GitLab resource models.

A model stores the fields of the last API payload it was hydrated from.
Only names listed in ``properties`` are kept; reading any other name raises
``UnknownPropertyError`` and assigning from outside raises
``ImmutableModelError``. Nested models are stored as-is so ``to_dict()`` can
render them back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Iterator, Mapping, Optional

from gitlab_api_models.application.exceptions.model_error import (
    ImmutableModelError,
    MissingClientError,
    MissingIdentifierError,
    UnknownPropertyError,
)

if TYPE_CHECKING:
    from gitlab_api_models.infrastructure.client import Client


class AbstractModel:
    properties: ClassVar[tuple[str, ...]] = ()
    # fields shown by repr()
    identity: ClassVar[tuple[str, ...]] = ("id",)
    # parent references set by the constructor; payloads never replace them
    bound: ClassVar[tuple[str, ...]] = ()

    def __init__(self, client: Optional["Client"] = None):
        object.__setattr__(self, "_data", {})
        object.__setattr__(self, "_client", None)
        self.set_client(client)

    # -- hydration -----------------------------------------------------

    def hydrate(self, data: Optional[Mapping[str, Any]] = None) -> "AbstractModel":
        if data:
            for field, value in data.items():
                if field in type(self).bound and field in self:
                    continue
                self._set_data(field, value)
        return self

    def _set_data(self, field: str, value: Any) -> "AbstractModel":
        if field in type(self).properties:
            self._data[field] = value
        return self

    # -- client --------------------------------------------------------

    @property
    def client(self) -> Optional["Client"]:
        return self._client

    def set_client(self, client: Optional["Client"] = None) -> "AbstractModel":
        if client is not None:
            object.__setattr__(self, "_client", client)
        return self

    def api(self, name: str):
        if self._client is None:
            raise MissingClientError(type(self).__name__)
        return self._client.api(name)

    # -- attribute access ----------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for payload fields.
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableModelError(type(self).__name__, name)

    def __delattr__(self, name: str) -> None:
        raise ImmutableModelError(type(self).__name__, name)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._data.get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def get(self, name: str) -> Any:
        """Returns the stored value, or None when the field was never set."""
        if name not in type(self).properties:
            raise UnknownPropertyError(type(self).__name__, name)
        return self._data.get(name)

    def _require(self, name: str) -> Any:
        """Returns a field needed to build an API path; None is refused."""
        value = self.get(name)
        if value is None:
            raise MissingIdentifierError(type(self).__name__, name)
        return value

    def has(self, name: str) -> bool:
        return name in self

    @property
    def data(self) -> dict[str, Any]:
        return dict(self._data)

    def to_dict(self) -> dict[str, Any]:
        return {field: _render(value) for field, value in self._data.items()}

    def __repr__(self) -> str:
        fields = " ".join(f"{name}={self._data.get(name)!r}" for name in type(self).identity)
        return f"<{type(self).__name__} {fields}>"


def _render(value: Any) -> Any:
    if isinstance(value, AbstractModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_render(item) for item in value]
    return value
