# ============================================================================
# CONTRACT TESTS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Tests - Descriptors, outcomes, errors
# PURPOSE: Verify descriptor validity rules and outcome shapes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Contract Tests

Run with:
    pytest tests/test_contracts.py -v
"""

import pytest
from pydantic import ValidationError

from core.contracts import (
    BindingErrorCode,
    ResolutionOutcome,
    ResolutionState,
    ServiceDescriptor,
)
from core.errors import (
    ConnectionFailedError,
    InvalidServiceError,
    MissingRequiredAliasError,
    UnsupportedServiceError,
)


# ============================================================================
# SERVICE DESCRIPTOR
# ============================================================================

class TestServiceDescriptor:
    """Tests for ServiceDescriptor validity."""

    def test_complete_descriptor_is_valid(self):
        d = ServiceDescriptor(name="a", label="mysql-5.5", credentials={"host": "h"})
        assert d.is_valid is True

    def test_missing_name_is_invalid(self):
        d = ServiceDescriptor(label="mysql-5.5", credentials={"host": "h"})
        assert d.is_valid is False

    def test_empty_credentials_is_invalid(self):
        d = ServiceDescriptor(name="a", label="mysql-5.5", credentials={})
        assert d.is_valid is False

    def test_null_credentials_parsed_as_empty(self):
        d = ServiceDescriptor.model_validate({"name": "a", "label": "x", "credentials": None})
        assert d.credentials == {}
        assert d.is_valid is False

    @pytest.mark.parametrize("credentials", [[], "oops", 7, ["host"]])
    def test_non_object_credentials_parsed_as_empty(self, credentials):
        d = ServiceDescriptor.model_validate({"name": "a", "label": "x", "credentials": credentials})
        assert d.credentials == {}
        assert d.is_valid is False

    @pytest.mark.parametrize("value,expected", [
        (42, "42"),
        (5.5, "5.5"),
        (True, None),
        (["mysql"], None),
        ({"n": 1}, None),
    ])
    def test_non_string_name_and_label_coerced(self, value, expected):
        d = ServiceDescriptor.model_validate({"name": value, "label": value, "credentials": {"u": 1}})
        assert d.name == expected
        assert d.label == expected

    def test_non_object_entry_parsed_as_empty(self):
        d = ServiceDescriptor.model_validate("mysql-5.5")
        assert d.name is None
        assert d.label is None
        assert d.credentials == {}

    def test_extra_platform_fields_kept(self):
        d = ServiceDescriptor.model_validate({
            "name": "a",
            "label": "redis-2.6",
            "plan": "100",
            "tags": ["cache"],
            "credentials": {"host": "h"},
        })
        assert d.plan == "100"
        assert d.tags == ["cache"]

    def test_descriptor_is_frozen(self):
        d = ServiceDescriptor(name="a", label="x", credentials={"url": "u"})
        with pytest.raises(ValidationError):
            d.name = "b"

    def test_has_credentials(self):
        d = ServiceDescriptor(
            name="a",
            label="mysql-5.5",
            credentials={"host": "h", "port": 3306, "username": "u", "password": ""},
        )
        assert d.has_credentials("host", "port") is True
        assert d.has_credentials("host", "password") is False
        assert d.missing_credentials("host", "password", "url") == ["password", "url"]

    def test_zero_port_counts_as_missing(self):
        d = ServiceDescriptor(name="a", label="x", credentials={"port": 0})
        assert d.missing_credentials("port") == ["port"]


# ============================================================================
# RESOLUTION OUTCOME
# ============================================================================

class TestResolutionOutcome:
    """Tests for the Ready | Failed outcome type."""

    def test_ready_outcome(self):
        outcome = ResolutionOutcome.ready_outcome()
        assert outcome.ready is True
        assert outcome.failed is False
        assert outcome.error is None
        assert outcome.error_code is None
        assert outcome.to_dict() == {"state": "ready"}

    def test_failed_outcome_carries_code(self):
        error = MissingRequiredAliasError(["mongodb"])
        outcome = ResolutionOutcome.failed_outcome(error)
        assert outcome.state == ResolutionState.FAILED
        assert outcome.error is error
        assert outcome.error_code == "missing_required_alias"
        assert outcome.to_dict()["error"] == "missing service mongodb"

    def test_failed_outcome_with_foreign_error_has_no_code(self):
        outcome = ResolutionOutcome.failed_outcome(RuntimeError("boom"))
        assert outcome.error_code is None

    def test_warnings_listed(self):
        warning = UnsupportedServiceError("postgres-9.4", "postgres-9.4")
        outcome = ResolutionOutcome.ready_outcome([warning])
        assert outcome.to_dict()["warnings"] == ["Unsupported service postgres-9.4/postgres-9.4"]

    def test_terminal_states(self):
        assert ResolutionState.READY.is_terminal()
        assert ResolutionState.FAILED.is_terminal()
        assert not ResolutionState.INITIALIZING.is_terminal()


# ============================================================================
# ERRORS
# ============================================================================

class TestErrors:
    """Tests for binding error codes and messages."""

    def test_invalid_service_lists_missing_fields(self):
        error = InvalidServiceError("mysql-5.5", "a", ["password"])
        assert error.code == BindingErrorCode.INVALID_SERVICE
        assert "password" in str(error)

    def test_connection_error_keeps_original(self):
        original = ConnectionRefusedError("refused")
        error = ConnectionFailedError(original, "redis-2.6", "cache")
        assert error.original is original
        assert str(error) == "refused"
        assert error.code == BindingErrorCode.CONNECTION_ERROR

    def test_missing_alias_lists_all(self):
        error = MissingRequiredAliasError(["mongodb", "mq"])
        assert error.missing == ["mongodb", "mq"]
        assert str(error) == "missing service mongodb, mq"
