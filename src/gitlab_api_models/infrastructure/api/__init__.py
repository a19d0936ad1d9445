from .abstract_api import AbstractApi
from .merge_requests_api import MergeRequestsApi
from .projects_api import ProjectsApi

__all__ = ["AbstractApi", "MergeRequestsApi", "ProjectsApi"]
