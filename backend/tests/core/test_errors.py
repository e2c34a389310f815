"""Failure Taxonomy - kinds, default statuses, and the error envelope shape."""

from app.core.domain_types import ResourceKind
from app.core.errors import (
    Failure, FailureKind, ErrorSeverity,
    internal_error, not_found, validation_error,
)


def test_default_statuses_per_kind():
    assert FailureKind.VALIDATION.default_status == 400
    assert FailureKind.NOT_FOUND.default_status == 404
    assert FailureKind.ROUTE_NOT_FOUND.default_status == 404
    assert FailureKind.INTERNAL.default_status == 500


def test_not_found_names_the_resource():
    failure = not_found(ResourceKind.USER)
    assert failure.message == "User not found"
    assert failure.status == 404
    assert not_found(ResourceKind.PRODUCT).message == "Product not found"


def test_to_response_omits_trace_by_default():
    failure = validation_error("Name and email are required")
    assert failure.to_response() == {
        "success": False,
        "error": "Name and email are required",
        "status": 400,
    }


def test_to_response_includes_trace_when_asked():
    body = validation_error("bad").to_response(include_trace=True)
    assert "stack" in body
    assert "test_to_response_includes_trace_when_asked" in body["stack"]


def test_trace_excluded_from_equality():
    assert validation_error("x") == Failure(FailureKind.VALIDATION, "x", 400)


def test_internal_error_hides_exception_message():
    try:
        raise RuntimeError("secret connection string")
    except RuntimeError as exc:
        failure = internal_error(exc)
    assert failure.status == 500
    assert failure.message == "Internal server error"
    assert "secret connection string" in failure.trace


def test_internal_error_keeps_explicit_status_code():
    class Teapot(Exception):
        status_code = 418

    assert internal_error(Teapot()).status == 418


def test_internal_error_ignores_non_error_status_codes():
    class Odd(Exception):
        status_code = 200

    assert internal_error(Odd()).status == 500


def test_severity_is_critical_only_for_internal():
    assert FailureKind.INTERNAL.severity is ErrorSeverity.CRITICAL
    assert FailureKind.NOT_FOUND.severity is ErrorSeverity.WARNING


def test_code_is_upper_kind():
    assert not_found(ResourceKind.USER).code == "NOT_FOUND"
