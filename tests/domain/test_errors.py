"""Tests for error messages and the error hierarchy."""

from __future__ import annotations

import pytest

from dnsnames.domain.errors import (
    DomainNameError,
    FullyQualifiedDomainNameError,
    NameErrorKind,
    PartiallyQualifiedDomainNameError,
    PatternError,
    SegmentError,
    SegmentErrorKind,
    SuffixMismatchError,
)
from dnsnames.domain.names import FullyQualifiedDomainName


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [
            SegmentError,
            FullyQualifiedDomainNameError,
            PartiallyQualifiedDomainNameError,
            PatternError,
            SuffixMismatchError,
        ],
    )
    def test_all_are_value_errors(self, cls: type) -> None:
        assert issubclass(cls, DomainNameError)
        assert issubclass(cls, ValueError)


class TestMessages:
    @pytest.mark.parametrize(
        "error,message",
        [
            (SegmentError(SegmentErrorKind.EMPTY_STRING), "segment is an empty string"),
            (SegmentError(SegmentErrorKind.TOO_LONG, length=70), "segment too long 70 > 63"),
            (SegmentError(SegmentErrorKind.INVALID_CHARACTER, character="_"), "invalid character '_'"),
            (SegmentError(SegmentErrorKind.ILLEGAL_HYPHEN, position=3), "illegal hyphen at position 3"),
        ],
    )
    def test_segment_messages(self, error: SegmentError, message: str) -> None:
        assert str(error) == message

    def test_name_message(self) -> None:
        err = FullyQualifiedDomainNameError(NameErrorKind.DOMAIN_IS_PARTIALLY_QUALIFIED)
        assert str(err) == "domain is partially qualified"

    def test_wrapped_message_names_segment(self) -> None:
        inner = SegmentError(SegmentErrorKind.EMPTY_STRING)
        err = PatternError(NameErrorKind.SEGMENT_ERROR, segment_error=inner, index=2)
        assert str(err) == "segment 2: segment is an empty string"

    def test_suffix_mismatch_message(self) -> None:
        err = SuffixMismatchError(
            FullyQualifiedDomainName.parse("www.example.org."),
            FullyQualifiedDomainName.parse("example.com."),
        )
        assert str(err) == "example.com. is not a suffix of www.example.org."
