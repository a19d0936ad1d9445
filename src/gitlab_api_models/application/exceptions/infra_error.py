from gitlab_api_models.application.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for all infrastructure layer exceptions.
    Raised when configuration, transport or the remote API fails.
    """
    pass
