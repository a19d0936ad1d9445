from .gitlab_settings import GitLabSettings

__all__ = ["GitLabSettings"]
