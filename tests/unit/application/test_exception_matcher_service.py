"""Unit tests for the exception tag matcher."""

from __future__ import annotations

import pytest

from swarm_relay.application.ports.change_description import ChangeDescriptionError
from swarm_relay.application.services.exception_matcher_service import (
    EXCEPTION_TAGS,
    ExceptionTagMatcher,
    find_exception_tag,
)
from swarm_relay.infrastructure.stubs import ChangeDescriptionReaderStub


class TestFindExceptionTag:
    """Tests for find_exception_tag."""

    @pytest.mark.parametrize("tag", EXCEPTION_TAGS)
    def test_each_tag_matches_anywhere(self, tag: str) -> None:
        assert find_exception_tag(f"Bulk import{tag}of assets") == tag

    def test_case_sensitive(self) -> None:
        assert find_exception_tag("Import #NoSwarm") is None

    def test_no_tag(self) -> None:
        assert find_exception_tag("Fix the build") is None


class TestExceptionTagMatcher:
    """Tests for ExceptionTagMatcher.is_exception."""

    def test_tagged_change(self) -> None:
        reader = ChangeDescriptionReaderStub({"12": "Huge import #skip-swarm"})

        assert ExceptionTagMatcher(reader).is_exception("12") is True

    def test_untagged_change(self) -> None:
        reader = ChangeDescriptionReaderStub({"12": "Fix the build"})

        assert ExceptionTagMatcher(reader).is_exception("12") is False

    def test_reads_description_every_time(self) -> None:
        reader = ChangeDescriptionReaderStub(default="Fix")
        matcher = ExceptionTagMatcher(reader)

        matcher.is_exception("12")
        matcher.is_exception("12")

        assert reader.lookups == ["12", "12"]

    def test_reader_failure_propagates(self) -> None:
        matcher = ExceptionTagMatcher(ChangeDescriptionReaderStub(fail=True))

        with pytest.raises(ChangeDescriptionError):
            matcher.is_exception("12")
