from .gitlab_http_client import GitLabHttpClient

__all__ = ["GitLabHttpClient"]
