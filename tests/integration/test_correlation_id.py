import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/api/products", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, api_client_with_correlation, caplog):
        api_client, cid = api_client_with_correlation
        with caplog.at_level(logging.INFO):
            api_client.get("/api/products/2000")
        found = any(cid in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{cid}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_validation_failure_is_logged(self, api_client, caplog):
        with caplog.at_level(logging.WARNING):
            api_client.post("/api/products", {}, format="json")
        assert any(
            "request.validation_failed" in record.getMessage()
            for record in caplog.records
        )

    def test_gate_log_carries_request_scope(self, api_client_with_correlation, caplog):
        api_client, cid = api_client_with_correlation
        with caplog.at_level(logging.WARNING):
            api_client.post("/api/products", {}, format="json")
        gate_records = [
            record.getMessage()
            for record in caplog.records
            if "request.validation_failed" in record.getMessage()
        ]
        assert gate_records
        assert cid in gate_records[0]
        assert "/api/products" in gate_records[0]

    def test_request_id_is_cleared_between_requests(self, client, caplog):
        client.get("/health", HTTP_X_REQUEST_ID="first-request-id")
        caplog.clear()
        with caplog.at_level(logging.INFO):
            client.get("/health")
        assert all("first-request-id" not in r.getMessage() for r in caplog.records)
