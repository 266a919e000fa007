"""Tests for ServiceResult and ServiceError."""

import pytest
from pydantic import ValidationError

from slugline.services.result import ServiceError, ServiceResult, failure


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="encode_issue", data={"slug": "a-1"})
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult(
            ok=False,
            op="decode_id",
            error=ServiceError(code="INVALID_SLUG", message="bad", detail={"slug": "x"}),
        )
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result


class TestFailure:
    def test_builds_error(self) -> None:
        result = failure("decode_id", "INVALID_SLUG", "bad slug", slug="report")
        assert result.ok is False
        assert result.op == "decode_id"
        assert result.error is not None
        assert result.error.code == "INVALID_SLUG"
        assert result.error.detail == {"slug": "report"}
