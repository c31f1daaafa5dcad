# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for exception handling and secret redaction."""
from __future__ import annotations

import pytest
from perfcounter2csv.core.exceptions import (
    REDACTED,
    AuthenticationError,
    ConfigurationError,
    CsvWriteError,
    OutputError,
    OutputFileError,
    PerfCounterError,
    RetrievalError,
    VSphereConnectionError,
    VSphereError,
    format_exception_for_cli,
)
from perfcounter2csv.vmware.vsphere.errors import ExitCode


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test exception class hierarchy and basic functionality."""

    def test_base_exception_creation(self):
        err = PerfCounterError(code=1, msg="Test error")

        assert err.code == 1
        assert err.msg == "Test error"
        assert err.cause is None
        assert err.context == {}
        assert str(err) == "Test error"

    def test_remote_errors_share_base(self):
        for cls in (VSphereConnectionError, AuthenticationError, RetrievalError):
            assert issubclass(cls, VSphereError)
            assert issubclass(cls, PerfCounterError)

    def test_output_errors_share_base(self):
        assert issubclass(OutputFileError, OutputError)
        assert issubclass(CsvWriteError, OutputError)

    def test_codes_match_exit_code_table(self):
        assert ConfigurationError().code == ExitCode.USAGE
        assert AuthenticationError().code == ExitCode.AUTH
        assert VSphereConnectionError().code == ExitCode.NETWORK
        assert RetrievalError().code == ExitCode.VSPHERE_API
        assert OutputFileError().code == ExitCode.LOCAL_IO
        assert CsvWriteError().code == ExitCode.LOCAL_IO

    def test_message_is_single_line(self):
        err = RetrievalError("line one\nline two\r\nline three")
        assert err.msg == "line one line two line three"

    def test_exception_with_context(self):
        err = ConfigurationError("bad url").with_context(url="https://host/sdk")
        assert err.context["url"] == "https://host/sdk"

    def test_exception_with_cause(self):
        cause = ValueError("Port could not be cast to integer value")
        err = ConfigurationError("invalid URL", cause=cause)
        assert err.cause is cause


@pytest.mark.unit
class TestExitCodeClamping:
    def test_valid_exit_codes(self):
        for code in [0, 1, 2, 127, 255]:
            assert PerfCounterError(code=code, msg="Test").code == code

    def test_out_of_range_codes_are_clamped(self):
        assert PerfCounterError(code=256, msg="Too high").code == 255
        assert PerfCounterError(code=-1, msg="Negative").code == 1

    def test_non_int_code_falls_back(self):
        assert PerfCounterError(code="nope", msg="x").code == 1


@pytest.mark.security
class TestSecretRedaction:
    def test_password_redacted_in_dict(self):
        err = AuthenticationError("Auth failed").with_context(
            username="administrator@vsphere.local",
            password="super_secret_123",
            host="vcenter.local",
        )
        d = err.to_dict()
        assert d["context"]["password"] == REDACTED
        assert d["context"]["username"] == "administrator@vsphere.local"
        assert d["context"]["host"] == "vcenter.local"

    def test_nested_secret_redacted(self):
        err = PerfCounterError(msg="Error").with_context(credentials={"password": "secret123", "user": "root"})
        d = err.to_dict()
        assert d["context"]["credentials"]["password"] == REDACTED
        assert d["context"]["credentials"]["user"] == "root"

    def test_cli_message_redacts_context(self):
        err = AuthenticationError("login failed").with_context(password="hunter2", host="esx01")
        line = format_exception_for_cli(err, verbose=1)
        assert "hunter2" not in line
        assert "esx01" in line


@pytest.mark.unit
class TestFormatForCli:
    def test_plain(self):
        assert format_exception_for_cli(RetrievalError("boom")) == "boom"

    def test_cause_only_when_very_verbose(self):
        err = OutputFileError("cannot create out.csv", cause=PermissionError("denied"))
        assert "PermissionError" not in format_exception_for_cli(err, verbose=1)
        assert "PermissionError" in format_exception_for_cli(err, verbose=2)

    def test_foreign_exception(self):
        assert format_exception_for_cli(RuntimeError("x")) == "x"
        assert format_exception_for_cli(RuntimeError("x"), verbose=2) == "RuntimeError: x"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
