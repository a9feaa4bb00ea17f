"""
Unit tests for error types.
"""

from auth_store.errors import (
    AuthStoreError,
    ConfigurationError,
    ConnectionError,
    IdentityRejectedError,
)
from auth_store.models.error_response import IdentityFault


class TestErrors:
    """Test cases for error types."""

    def test_auth_store_error(self):
        """Test base AuthStoreError."""
        error = AuthStoreError("Test error", status_code=400, error_body={"code": 400})

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.status_code == 400
        assert error.error_body == {"code": 400}

    def test_auth_store_error_minimal(self):
        """Test AuthStoreError with minimal args."""
        error = AuthStoreError("Simple error")

        assert str(error) == "Simple error"
        assert error.status_code is None
        assert error.error_body is None

    def test_identity_rejected_error(self):
        error = IdentityRejectedError("Rejected", status_code=401)

        assert isinstance(error, AuthStoreError)
        assert error.status_code == 401

    def test_connection_error(self):
        error = ConnectionError("Connection failed")

        assert isinstance(error, AuthStoreError)
        assert str(error) == "Connection failed"

    def test_configuration_error(self):
        error = ConfigurationError("Config invalid")

        assert isinstance(error, AuthStoreError)
        assert str(error) == "Config invalid"

    def test_identity_fault_model(self):
        """Test IdentityFault accepts both field name and alias."""
        fault = IdentityFault(name="unauthorized", code=401, request_id="req-1")
        same = IdentityFault(name="unauthorized", code=401, requestId="req-1")

        assert fault.requestId == "req-1"
        assert fault == same
