"""
Tests for the directory error hierarchy.
"""

from __future__ import annotations

import pytest

from expo_directory.core.errors import (
    ConfigError,
    DirectoryError,
    ErrorCategory,
    ErrorContext,
    InvalidLetterError,
    ParseError,
    SheetNotFoundError,
    SourceError,
    SourceUnavailableError,
    UnknownActionError,
    ValidationError,
)


class TestCategories:
    @pytest.mark.parametrize(
        "error, category",
        [
            (InvalidLetterError("1"), ErrorCategory.VALIDATION),
            (UnknownActionError("drop"), ErrorCategory.VALIDATION),
            (SheetNotFoundError("Sheet not found: Team"), ErrorCategory.SOURCE),
            (SourceUnavailableError("offline"), ErrorCategory.SOURCE),
            (ParseError("bad json"), ErrorCategory.PARSE),
            (ConfigError("bad config"), ErrorCategory.CONFIG),
            (DirectoryError("generic"), ErrorCategory.INTERNAL),
        ],
    )
    def test_default_category(self, error, category):
        assert error.category is category

    def test_explicit_category_overrides_default(self):
        assert DirectoryError("x", category=ErrorCategory.SOURCE).category is ErrorCategory.SOURCE

    def test_hierarchy(self):
        assert issubclass(InvalidLetterError, ValidationError)
        assert issubclass(SheetNotFoundError, SourceError)
        assert issubclass(SourceError, DirectoryError)


class TestMessages:
    def test_invalid_letter(self):
        error = InvalidLetterError("AB")
        assert error.message == "Invalid letter parameter. Must be A-Z."
        assert str(error) == error.message
        assert error.field == "letter"
        assert error.value == "AB"

    def test_unknown_action(self):
        assert UnknownActionError("drop").message == "Invalid action"


class TestContext:
    def test_with_context_known_and_metadata(self):
        error = SheetNotFoundError("Sheet not found: Team").with_context(
            sheet="Team", source_name="csv:./data", attempt=1
        )
        assert error.context.sheet == "Team"
        assert error.context.source_name == "csv:./data"
        assert error.context.metadata == {"attempt": 1}

    def test_with_context_is_fluent(self):
        error = ParseError("bad")
        assert error.with_context(sheet="x") is error

    def test_empty_context_dict(self):
        assert ErrorContext().to_dict() == {}


class TestToDict:
    def test_base(self):
        cause = OSError("disk")
        error = SourceUnavailableError("offline", cause=cause).with_context(sheet="Team")
        data = error.to_dict()
        assert data["error_type"] == "SourceUnavailableError"
        assert data["message"] == "offline"
        assert data["category"] == "SOURCE"
        assert data["context"] == {"sheet": "Team"}
        assert data["cause"] == "disk"
        assert error.__cause__ is cause

    def test_validation_fields(self):
        data = InvalidLetterError("AB").to_dict()
        assert data["field"] == "letter"
        assert data["value"] == "'AB'"
