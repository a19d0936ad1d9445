from gitlab_api_models.infrastructure.observability.logging.correlation_id_context import CorrelationIdContext
from gitlab_api_models.infrastructure.observability.logging.event_schema_processor import event_schema_processor


def test_nests_http_error_and_context_blocks():
    event = {
        "event": "GitLab GET projects/1 -> 404",
        "level": "error",
        "timestamp": "2026-01-01T00:00:00Z",
        "http_method": "GET",
        "http_path": "projects/1",
        "http_status": 404,
        "error_type": "GitLabApiError",
        "error_code": "not_found",
        "context_component": "merge_requests",
        "context_resource_id": 7,
        "attempt": 1,
    }

    result = event_schema_processor(None, "error", event)

    assert result["message"] == "GitLab GET projects/1 -> 404"
    assert result["level"] == "error"
    assert result["http"] == {"method": "GET", "path": "projects/1", "status": 404, "duration_ms": None}
    assert result["error"]["type"] == "GitLabApiError"
    assert result["error"]["retryable"] is False
    assert result["context"] == {"component": "merge_requests", "resource": None, "resource_id": 7}
    assert result["extra"] == {"attempt": 1}


def test_optional_blocks_are_omitted():
    result = event_schema_processor(None, "info", {"event": "hello"})

    assert "http" not in result
    assert "error" not in result
    assert "context" not in result
    assert "extra" not in result


def test_correlation_id_falls_back_to_context():
    context = CorrelationIdContext()
    context.set("corr-1")
    try:
        result = event_schema_processor(None, "info", {"event": "hello"})
    finally:
        context.clear()

    assert result["correlation_id"] == "corr-1"
