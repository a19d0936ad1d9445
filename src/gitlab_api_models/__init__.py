"""Typed resource models over the GitLab REST API, centred on merge requests."""

import logging

from gitlab_api_models.application.exceptions import (
    ConfigurationError,
    DomainError,
    GitLabApiError,
    GitLabTransportError,
    ImmutableModelError,
    InvalidApiNameError,
    MissingClientError,
    MissingIdentifierError,
    UnknownPropertyError,
)
from gitlab_api_models.application.models import (
    File,
    FileDiff,
    MergeRequest,
    Milestone,
    Note,
    Noteable,
    Project,
    User,
)
from gitlab_api_models.infrastructure.client import Client
from gitlab_api_models.infrastructure.configuration import GitLabSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "ConfigurationError",
    "DomainError",
    "File",
    "FileDiff",
    "GitLabApiError",
    "GitLabSettings",
    "GitLabTransportError",
    "ImmutableModelError",
    "InvalidApiNameError",
    "MergeRequest",
    "MissingClientError",
    "MissingIdentifierError",
    "Milestone",
    "Note",
    "Noteable",
    "Project",
    "UnknownPropertyError",
    "User",
]
