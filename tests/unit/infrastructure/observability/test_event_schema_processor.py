from jira_to_hook.infrastructure.observability.logging.event_schema_processor import (
    event_schema_processor,
)


def test_root_fields_and_extra(monkeypatch):
    monkeypatch.setenv("APP_ENV", "qa")
    event = {"event": "Sending", "level": "info", "timestamp": "t", "correlation_id": "c1", "issue_key": "QA-1"}

    result = event_schema_processor(None, "info", event)

    assert result["event"] == "Sending"
    assert result["service"] == "jira-to-hook"
    assert result["environment"] == "qa"
    assert result["correlation_id"] == "c1"
    assert result["extra"] == {"issue_key": "QA-1"}


def test_groups_prefixed_blocks():
    event = {
        "event": "Request processed",
        "processing_status": "SUCCESS",
        "processing_duration_ms": 1.5,
        "context_endpoint": "/",
        "context_method": "POST",
    }

    result = event_schema_processor(None, "info", event)

    assert result["processing"] == {"status": "SUCCESS", "duration_ms": 1.5}
    assert result["context"] == {"endpoint": "/", "method": "POST"}
    assert "extra" not in result


def test_block_without_trigger_key_stays_in_extra():
    result = event_schema_processor(None, "info", {"event": "x", "error_code": 7})

    assert "error" not in result
    assert result["extra"] == {"error_code": 7}
