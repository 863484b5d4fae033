"""Tests for label validation and the Segment value type."""

from __future__ import annotations

import pytest

from dnsnames.domain.errors import SegmentError, SegmentErrorKind
from dnsnames.domain.names import FullyQualifiedDomainName, PartiallyQualifiedDomainName
from dnsnames.domain.segment import Segment, fold_case


class TestValidSegments:
    @pytest.mark.parametrize(
        "text",
        [
            "a",
            "example",
            "www",
            "0",
            "123abc",
            "a-b",
            "a-b-c",
            "ab-cd",
            "abc--d",
            "*",
            "@",
            "a" * 63,
        ],
    )
    def test_accepts(self, text: str) -> None:
        assert str(Segment(text)) == text

    def test_lowercases(self) -> None:
        assert str(Segment("ExAmPlE")) == "example"

    def test_parse_is_constructor(self) -> None:
        assert Segment.parse("WWW") == Segment("www")

    def test_length(self) -> None:
        assert len(Segment("example")) == 7

    def test_wildcard_flags(self) -> None:
        assert Segment("*").is_wildcard
        assert not Segment("*").is_origin
        assert not Segment("www").is_wildcard

    def test_origin_flags(self) -> None:
        assert Segment("@").is_origin
        assert not Segment("@").is_wildcard

    def test_frozen(self) -> None:
        seg = Segment("www")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]

    def test_ordering_and_hashing(self) -> None:
        assert Segment("a") < Segment("b")
        assert sorted([Segment("c"), Segment("a")]) == [Segment("a"), Segment("c")]
        assert len({Segment("WWW"), Segment("www")}) == 1


class TestInvalidSegments:
    def test_empty(self) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment("")
        assert exc_info.value.kind is SegmentErrorKind.EMPTY_STRING

    def test_too_long(self) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment("a" * 64)
        assert exc_info.value.kind is SegmentErrorKind.TOO_LONG
        assert exc_info.value.length == 64

    @pytest.mark.parametrize(
        "text,character",
        [("exa.mple", "."), ("under_score", "_"), ("sp ace", " "), ("café", "é")],
    )
    def test_invalid_character(self, text: str, character: str) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment(text)
        assert exc_info.value.kind is SegmentErrorKind.INVALID_CHARACTER
        assert exc_info.value.character == character

    @pytest.mark.parametrize(
        "text,position",
        [("-abc", 1), ("abc-", 4), ("ab--cd", 3), ("xn--abc", 3), ("-", 1)],
    )
    def test_illegal_hyphen(self, text: str, position: int) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment(text)
        assert exc_info.value.kind is SegmentErrorKind.ILLEGAL_HYPHEN
        assert exc_info.value.position == position

    @pytest.mark.parametrize("text", ["*a", "a*", "dev*", "**"])
    def test_non_standalone_wildcard(self, text: str) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment(text)
        assert exc_info.value.kind is SegmentErrorKind.NON_STANDALONE_WILDCARD

    @pytest.mark.parametrize("text", ["@a", "a@", "@@"])
    def test_non_standalone_origin(self, text: str) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment(text)
        assert exc_info.value.kind is SegmentErrorKind.NON_STANDALONE_ORIGIN

    def test_length_checked_before_characters(self) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment("_" * 64)
        assert exc_info.value.kind is SegmentErrorKind.TOO_LONG

    def test_characters_checked_before_hyphens(self) -> None:
        with pytest.raises(SegmentError) as exc_info:
            Segment("-a_")
        assert exc_info.value.kind is SegmentErrorKind.INVALID_CHARACTER

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="empty string"):
            Segment("")


class TestFoldCase:
    def test_ascii_only(self) -> None:
        assert fold_case("ABCÉ") == "abcÉ"


class TestPrepend:
    def test_to_fqdn(self) -> None:
        result = Segment("www") + FullyQualifiedDomainName.parse("example.org.")
        assert result == FullyQualifiedDomainName.parse("www.example.org.")

    def test_to_pqdn(self) -> None:
        result = Segment("www") + PartiallyQualifiedDomainName.parse("example")
        assert result == PartiallyQualifiedDomainName.parse("www.example")

    def test_wildcard_onto_plain_name(self) -> None:
        result = Segment("*") + FullyQualifiedDomainName.parse("example.org.")
        assert str(result) == "*.example.org."

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Segment("www") + "example.org."  # type: ignore[operator]
