from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_api_models.application.exceptions.configuration_error import ConfigurationError


class GitLabSettings(BaseSettings):
    """Settings for reaching the GitLab REST API."""

    # ── Connection ──
    base_url: str = Field(default="https://gitlab.com", alias="GITLAB_BASE_URL")
    token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")
    api_version: str = Field(default="v4", alias="GITLAB_API_VERSION")

    # ── Transport ──
    timeout_seconds: float = Field(default=10.0, alias="GITLAB_TIMEOUT_SECONDS")
    verify_ssl: bool = Field(default=True, alias="GITLAB_VERIFY_SSL")
    user_agent: str = Field(default="gitlab-api-models", alias="GITLAB_USER_AGENT")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def strip_slashes(cls, value: str) -> str:
        return value.strip("/")

    @property
    def api_root(self) -> str:
        return f"{self.base_url}/api/{self.api_version}"

    def validate_credentials(self) -> None:
        if not self.token or not self.token.get_secret_value():
            raise ConfigurationError("GitLab token is missing in settings.")

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)
