from typing import Any, Dict

from gitlab_api_models.infrastructure.api.abstract_api import AbstractApi, ProjectRef


class ProjectsApi(AbstractApi):
    def show(self, project_id: ProjectRef) -> Dict[str, Any]:
        return self.http.get(self.project_path(project_id))
