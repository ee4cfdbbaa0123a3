import logging

import structlog

from config.settings import configure_logging, mask_sensitive_data


class TestSensitiveDataMasking:
    def test_email_masked_in_log_output(self):
        event_dict = {"event": "test", "email": "maria@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "maria@example.com" not in result["email"]
        assert "***MASKED***" in result["email"]

    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "order.created", "order_id": "ORD-001", "count": 3}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["order_id"] == "ORD-001"
        assert result["event"] == "order.created"
        assert result["count"] == 3


class TestConfigureLogging:
    def test_routes_structlog_through_stdlib(self):
        configure_logging()
        try:
            root = logging.getLogger()
            assert root.handlers
            assert isinstance(
                root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
            )
        finally:
            structlog.reset_defaults()
