from typing import Any, Dict, List, Optional

from gitlab_api_models.application.exceptions.gitlab_api_error import GitLabApiError
from gitlab_api_models.infrastructure.api.abstract_api import AbstractApi, ProjectRef
from gitlab_api_models.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)


class MergeRequestsApi(AbstractApi):
    """Endpoints under projects/:id/merge_requests."""

    def _mr_path(self, project_id: ProjectRef, mr_iid: int, suffix: str = "") -> str:
        path = self.project_path(project_id, f"merge_requests/{mr_iid}")
        return f"{path}/{suffix}" if suffix else path

    def all(self, project_id: ProjectRef, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return self.http.get(self.project_path(project_id, "merge_requests"), params=self.clean_params(params)) or []

    def show(self, project_id: ProjectRef, mr_iid: int) -> Dict[str, Any]:
        return self.http.get(self._mr_path(project_id, mr_iid))

    def create(
        self,
        project_id: ProjectRef,
        source_branch: str,
        target_branch: str,
        title: str,
        assignee_id: Optional[int] = None,
        description: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        payload = {
            "source_branch": source_branch,
            "target_branch": target_branch,
            "title": title,
            "assignee_id": assignee_id,
            "description": description,
            **(params or {}),
        }
        logger.info(f"Creating MR {source_branch} -> {target_branch} in project {project_id}")
        try:
            return self.http.post(self.project_path(project_id, "merge_requests"), self.clean_params(payload))
        except GitLabApiError as e:
            if e.status_code == 409:
                logger.warning(f"MR already exists for {source_branch} -> {target_branch}. Fetching existing one.")
                return self._get_existing(project_id, source_branch, target_branch, e)
            raise

    def _get_existing(
        self, project_id: ProjectRef, source_branch: str, target_branch: str, conflict: GitLabApiError
    ) -> Dict[str, Any]:
        mrs = self.all(
            project_id,
            {"source_branch": source_branch, "target_branch": target_branch, "state": "opened"},
        )
        if mrs:
            return mrs[0]

        logger.error(f"GitLab reported a conflict but no open MR matches {source_branch} -> {target_branch}")
        raise conflict

    def update(self, project_id: ProjectRef, mr_iid: int, params: Dict[str, Any]) -> Dict[str, Any]:
        return self.http.put(self._mr_path(project_id, mr_iid), dict(params))

    def merge(self, project_id: ProjectRef, mr_iid: int, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.info(f"Merging MR !{mr_iid} in project {project_id}")
        return self.http.put(self._mr_path(project_id, mr_iid, "merge"), self.clean_params(params))

    def add_note(self, project_id: ProjectRef, mr_iid: int, body: str) -> Dict[str, Any]:
        return self.http.post(self._mr_path(project_id, mr_iid, "notes"), {"body": body})

    def show_notes(self, project_id: ProjectRef, mr_iid: int) -> List[Dict[str, Any]]:
        return self.http.get(self._mr_path(project_id, mr_iid, "notes")) or []

    def changes(self, project_id: ProjectRef, mr_iid: int) -> Dict[str, Any]:
        return self.http.get(self._mr_path(project_id, mr_iid, "changes"))

    def commits(self, project_id: ProjectRef, mr_iid: int) -> List[Dict[str, Any]]:
        return self.http.get(self._mr_path(project_id, mr_iid, "commits")) or []

    def subscribe(self, project_id: ProjectRef, mr_iid: int) -> Optional[Dict[str, Any]]:
        """Returns None when GitLab answers 304 (already subscribed)."""
        return self.http.post(self._mr_path(project_id, mr_iid, "subscribe"))

    def unsubscribe(self, project_id: ProjectRef, mr_iid: int) -> Optional[Dict[str, Any]]:
        """Returns None when GitLab answers 304 (not subscribed)."""
        return self.http.post(self._mr_path(project_id, mr_iid, "unsubscribe"))
