from __future__ import annotations

from gitlab_api_models.application.exceptions.domain_error import DomainError


class ModelError(DomainError):
    """Base class for misuse of a resource model."""


class MissingClientError(ModelError):
    def __init__(self, model_name: str):
        super().__init__(f"{model_name} has no client; cannot reach the GitLab API")
        self.model_name = model_name


class ImmutableModelError(ModelError):
    def __init__(self, model_name: str, attribute: str):
        super().__init__(f"Model properties are immutable: cannot set '{attribute}' on {model_name}")
        self.model_name = model_name
        self.attribute = attribute


class UnknownPropertyError(ModelError, AttributeError):
    def __init__(self, model_name: str, attribute: str):
        super().__init__(f'Property "{attribute}" does not exist for {model_name} object')
        self.model_name = model_name
        self.attribute = attribute


class InvalidApiNameError(ModelError, ValueError):
    def __init__(self, name: str):
        super().__init__(f'Invalid endpoint: "{name}"')
        self.name = name


class MissingIdentifierError(ModelError):
    def __init__(self, model_name: str, identifier: str):
        super().__init__(f"{model_name} has no {identifier}; cannot build the GitLab API path")
        self.model_name = model_name
        self.identifier = identifier
