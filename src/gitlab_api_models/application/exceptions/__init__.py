from .configuration_error import ConfigurationError
from .domain_error import DomainError
from .gitlab_api_error import GitLabApiError, GitLabTransportError
from .infra_error import InfraError
from .model_error import (
    ImmutableModelError,
    InvalidApiNameError,
    MissingClientError,
    MissingIdentifierError,
    ModelError,
    UnknownPropertyError,
)
from .provider_error import ProviderError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "GitLabApiError",
    "GitLabTransportError",
    "ImmutableModelError",
    "InfraError",
    "InvalidApiNameError",
    "MissingClientError",
    "MissingIdentifierError",
    "ModelError",
    "ProviderError",
    "UnknownPropertyError",
]
