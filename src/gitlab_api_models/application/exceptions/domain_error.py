class DomainError(Exception):
    """
    Base class for all exceptions raised by this library.
    Ensures a consistent exception hierarchy for catching GitLab model issues.
    """

    pass
