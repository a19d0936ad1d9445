import pytest

from gitlab_api_models.application.exceptions.configuration_error import ConfigurationError
from gitlab_api_models.infrastructure.configuration.gitlab_settings import GitLabSettings


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITLAB_BASE_URL", "https://git.internal.example/")
    monkeypatch.setenv("GITLAB_TOKEN", "env_token")
    monkeypatch.setenv("GITLAB_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("GITLAB_VERIFY_SSL", "false")

    settings = GitLabSettings()

    assert settings.base_url == "https://git.internal.example"
    assert settings.token.get_secret_value() == "env_token"
    assert settings.timeout_seconds == 2.5
    assert settings.verify_ssl is False


def test_defaults(monkeypatch):
    for name in ("GITLAB_BASE_URL", "GITLAB_TOKEN", "GITLAB_API_VERSION"):
        monkeypatch.delenv(name, raising=False)

    settings = GitLabSettings()

    assert settings.base_url == "https://gitlab.com"
    assert settings.api_root == "https://gitlab.com/api/v4"
    assert settings.token is None


def test_api_root_normalises_slashes():
    settings = GitLabSettings(base_url="https://gitlab.example.com///", api_version="/v4/", token="t")

    assert settings.api_root == "https://gitlab.example.com/api/v4"


def test_validate_credentials(settings):
    settings.validate_credentials()

    with pytest.raises(ConfigurationError):
        GitLabSettings(token="").validate_credentials()


def test_token_is_not_leaked_in_repr(settings):
    assert "mock_gl_token" not in repr(settings)
