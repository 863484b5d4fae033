"""Tests for NameService."""

from __future__ import annotations

import pytest

from dnsnames.domain.names import FullyQualifiedDomainName
from dnsnames.services.base import (
    INVALID_JOIN,
    INVALID_NAME,
    INVALID_PATTERN,
    NO_ORIGIN,
    SUFFIX_MISMATCH,
)
from dnsnames.services.names import NameService


@pytest.fixture
def service() -> NameService:
    return NameService()


@pytest.fixture
def zoned() -> NameService:
    return NameService(origin=FullyQualifiedDomainName.parse("example.org."))


class TestInspect:
    def test_fully_qualified(self, service: NameService) -> None:
        result = service.inspect("WWW.Example.org.")
        assert result.ok
        assert result.op == "inspect_name"
        assert result.data["name"] == "www.example.org."
        assert result.data["kind"] == "full"
        assert result.data["segments"] == ["www", "example", "org"]
        assert result.data["segment_count"] == 3
        assert result.data["length"] == 16

    def test_partially_qualified_wildcard(self, service: NameService) -> None:
        result = service.inspect("*.dev")
        assert result.data["kind"] == "partial"
        assert result.data["wildcard"] is True
        assert result.data["origin_relative"] is False

    def test_origin_relative(self, service: NameService) -> None:
        result = service.inspect("mail.@")
        assert result.data["origin_relative"] is True

    def test_root(self, service: NameService) -> None:
        result = service.inspect(".")
        assert result.ok
        assert result.data["segments"] == []
        assert result.data["wildcard"] is False

    def test_invalid(self, service: NameService) -> None:
        result = service.inspect("bad_label.org.")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_NAME
        assert result.error.detail["input"] == "bad_label.org."
        assert result.error.detail["segment_index"] == 0
        assert result.error.detail["segment_kind"] == "invalid_character"


class TestMatch:
    def test_splits_matches_and_misses(self, service: NameService) -> None:
        result = service.match(
            "*.example.org", ["www.example.org.", "a.b.example.org.", "example.org.", "x.com."]
        )
        assert result.ok
        assert result.data["pattern"] == "*.example.org"
        assert result.data["matches"] == ["www.example.org.", "a.b.example.org."]
        assert result.data["misses"] == ["example.org.", "x.com."]
        assert result.data["count"] == 2

    def test_partial_wildcard(self, service: NameService) -> None:
        result = service.match("dev*.example.org", ["dev-1.example.org.", "www.example.org."])
        assert result.data["matches"] == ["dev-1.example.org."]

    def test_invalid_names_become_warnings(self, service: NameService) -> None:
        result = service.match("*.org", ["www.org.", "-bad.org."])
        assert result.ok
        assert result.data["matches"] == ["www.org."]
        assert len(result.warnings) == 1
        assert "-bad.org." in result.warnings[0]

    def test_invalid_pattern(self, service: NameService) -> None:
        result = service.match("a**.org", ["a.org."])
        assert not result.ok
        assert result.op == "match_pattern"
        assert result.error is not None
        assert result.error.code == INVALID_PATTERN

    def test_origin_from_argument(self, service: NameService) -> None:
        result = service.match("www.@", ["www.example.org."], origin="example.org.")
        assert result.data["pattern"] == "www.example.org"
        assert result.data["matches"] == ["www.example.org."]

    def test_origin_from_default(self, zoned: NameService) -> None:
        result = zoned.match("*.@", ["mail.example.org.", "mail.example.com."])
        assert result.data["matches"] == ["mail.example.org."]

    def test_missing_origin(self, service: NameService) -> None:
        result = service.match("www.@", ["www.example.org."])
        assert not result.ok
        assert result.op == "match_pattern"
        assert result.error is not None
        assert result.error.code == NO_ORIGIN

    def test_invalid_origin(self, service: NameService) -> None:
        result = service.match("www.@", ["www.example.org."], origin="example.org")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_NAME


class TestRelativize:
    def test_with_explicit_origin(self, service: NameService) -> None:
        result = service.relativize("www.example.org.", origin="example.org.")
        assert result.ok
        assert result.data == {
            "name": "www.example.org.",
            "origin": "example.org.",
            "relative": "www",
        }

    def test_with_default_origin(self, zoned: NameService) -> None:
        result = zoned.relativize("a.b.example.org.")
        assert result.data["relative"] == "a.b"

    def test_mismatch(self, service: NameService) -> None:
        result = service.relativize("www.example.org.", origin="example.com.")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == SUFFIX_MISMATCH
        assert result.error.detail["name"] == "www.example.org."
        assert result.error.detail["origin"] == "example.com."

    def test_partial_name_rejected(self, zoned: NameService) -> None:
        result = zoned.relativize("www.example")
        assert result.error is not None
        assert result.error.code == INVALID_NAME

    def test_no_origin(self, service: NameService) -> None:
        result = service.relativize("www.example.org.")
        assert result.op == "relativize"
        assert result.error is not None
        assert result.error.code == NO_ORIGIN


class TestJoin:
    def test_onto_fully_qualified(self, service: NameService) -> None:
        result = service.join("www", "example.org.")
        assert result.ok
        assert result.data["name"] == "www.example.org."
        assert result.data["kind"] == "full"

    def test_onto_partially_qualified(self, service: NameService) -> None:
        result = service.join("api.v2", "internal")
        assert result.data["name"] == "api.v2.internal"
        assert result.data["kind"] == "partial"

    def test_invalid_relative(self, service: NameService) -> None:
        result = service.join("www.", "example.org.")
        assert result.error is not None
        assert result.error.code == INVALID_NAME

    def test_wildcard_ends_up_non_leading(self, service: NameService) -> None:
        result = service.join("www", "*.example.org.")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_JOIN


class TestSubdomain:
    def test_strict_subdomain(self, service: NameService) -> None:
        result = service.subdomain("www.example.org.", "example.org.")
        assert result.data["is_subdomain"] is True

    def test_irreflexive(self, service: NameService) -> None:
        result = service.subdomain("example.org.", "example.org.")
        assert result.data["is_subdomain"] is False

    def test_everything_below_root(self, service: NameService) -> None:
        assert service.subdomain("org.", ".").data["is_subdomain"] is True

    def test_invalid_parent(self, service: NameService) -> None:
        result = service.subdomain("www.example.org.", "example.org")
        assert result.error is not None
        assert result.error.detail["input"] == "example.org"
