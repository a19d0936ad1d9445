import time
from typing import Any, Optional
from uuid import uuid4

import httpx

from gitlab_api_models.application.exceptions.gitlab_api_error import (
    GitLabApiError,
    GitLabTransportError,
)
from gitlab_api_models.infrastructure.configuration.gitlab_settings import GitLabSettings
from gitlab_api_models.infrastructure.observability.logger_factory_service import build_logger
from gitlab_api_models.infrastructure.observability.logging.correlation_id_context import (
    CorrelationIdContext,
)
from gitlab_api_models.infrastructure.observability.redaction_service import redact_dict, redact_value

logger = build_logger(__name__)

NOT_MODIFIED = 304


class GitLabHttpClient:
    """Thin httpx wrapper: one request per call, JSON in, decoded JSON out."""

    def __init__(self, settings: GitLabSettings, correlation: Optional[CorrelationIdContext] = None):
        self.settings = settings
        self.base_url = settings.api_root
        self.correlation = correlation or CorrelationIdContext()
        self._validate_config()

    def _validate_config(self):
        self.settings.validate_credentials()

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
            "X-Correlation-ID": self.correlation.get() or str(uuid4()),
        }
        token = self.settings.token.get_secret_value() if self.settings.token else ""
        headers["PRIVATE-TOKEN"] = token
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json_data: Optional[dict[str, Any]] = None) -> Any:
        return self.request("POST", path, json_data=json_data)

    def put(self, path: str, json_data: Optional[dict[str, Any]] = None) -> Any:
        return self.request("PUT", path, json_data=json_data)

    def delete(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("DELETE", path, params=params)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json_data: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Sends one request and returns the decoded body.

        Returns None for 304 Not Modified and for empty bodies.
        Raises GitLabApiError for any other non-2xx status and
        GitLabTransportError when no response was received.
        """
        url = self._url(path)
        headers = self._get_headers()
        logger.debug(
            "GitLab request",
            extra={"http_method": method, "http_path": path, "headers": redact_dict(headers)},
        )
        started = time.perf_counter()
        try:
            with httpx.Client(verify=self.settings.verify_ssl) as client:
                response = client.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=json_data,
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.TransportError as e:
            logger.error(f"GitLab transport failure on {method} {path}: {e}")
            raise GitLabTransportError(
                provider="gitlab",
                message=f"{method} {path} failed: {e}",
                retryable=True,
            ) from e

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"GitLab {method} {path} -> {response.status_code}",
            extra={"http_status": response.status_code, "http_duration_ms": duration_ms},
        )
        return self._handle_response(method, path, response)

    def _handle_response(self, method: str, path: str, response: httpx.Response) -> Any:
        if response.status_code == NOT_MODIFIED:
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = self._decode(response)
            logger.error(f"GitLab {method} {path} failed: {redact_value(response.text)}")
            raise GitLabApiError.from_status(response.status_code, method, path, body) from e

        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
