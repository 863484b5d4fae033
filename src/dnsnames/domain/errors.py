"""Typed construction errors for segments, names and patterns.

Every failure derives from :class:`DomainNameError`, itself a
``ValueError``, so pydantic validators surface them as ordinary
validation errors.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dnsnames.domain.names import FullyQualifiedDomainName


class SegmentErrorKind(StrEnum):
    """Reasons a single label can be rejected."""

    EMPTY_STRING = "empty_string"
    TOO_LONG = "too_long"
    INVALID_CHARACTER = "invalid_character"
    ILLEGAL_HYPHEN = "illegal_hyphen"
    NON_STANDALONE_WILDCARD = "non_standalone_wildcard"
    NON_STANDALONE_ORIGIN = "non_standalone_origin"
    MULTIPLE_WILDCARDS = "multiple_wildcards"


class NameErrorKind(StrEnum):
    """Reasons a whole name or pattern can be rejected."""

    DOMAIN_IS_PARTIALLY_QUALIFIED = "domain_is_partially_qualified"
    DOMAIN_IS_FULLY_QUALIFIED = "domain_is_fully_qualified"
    NON_LEADING_WILDCARD = "non_leading_wildcard"
    ORIGIN_IN_NON_TERMINAL_SEGMENT = "origin_in_non_terminal_segment"
    SEGMENT_ERROR = "segment_error"


class DomainNameError(ValueError):
    """Base class for every construction failure in this package."""


class SegmentError(DomainNameError):
    """A label failed validation.

    Only the attribute relevant to ``kind`` is set: ``length`` for
    ``TOO_LONG``, ``character`` for ``INVALID_CHARACTER`` and the 1-based
    ``position`` for ``ILLEGAL_HYPHEN``.
    """

    def __init__(
        self,
        kind: SegmentErrorKind,
        *,
        length: int | None = None,
        character: str | None = None,
        position: int | None = None,
    ) -> None:
        self.kind = kind
        self.length = length
        self.character = character
        self.position = position
        super().__init__(self._describe())

    def _describe(self) -> str:
        match self.kind:
            case SegmentErrorKind.EMPTY_STRING:
                return "segment is an empty string"
            case SegmentErrorKind.TOO_LONG:
                return f"segment too long {self.length} > 63"
            case SegmentErrorKind.INVALID_CHARACTER:
                return f"invalid character {self.character!r}"
            case SegmentErrorKind.ILLEGAL_HYPHEN:
                return f"illegal hyphen at position {self.position}"
            case SegmentErrorKind.NON_STANDALONE_WILDCARD:
                return "wildcards must be standalone"
            case SegmentErrorKind.NON_STANDALONE_ORIGIN:
                return "origins must be standalone"
            case SegmentErrorKind.MULTIPLE_WILDCARDS:
                return "segments can only have one wildcard"
        return str(self.kind)


_NAME_MESSAGES: dict[NameErrorKind, str] = {
    NameErrorKind.DOMAIN_IS_PARTIALLY_QUALIFIED: "domain is partially qualified",
    NameErrorKind.DOMAIN_IS_FULLY_QUALIFIED: "domain is fully qualified",
    NameErrorKind.NON_LEADING_WILDCARD: "wildcard in non-leading segment",
    NameErrorKind.ORIGIN_IN_NON_TERMINAL_SEGMENT: (
        "non-terminal segment contains origin (@) segment"
    ),
}


class CompositeNameError(DomainNameError):
    """A name or pattern built from several segments was rejected.

    For ``NameErrorKind.SEGMENT_ERROR`` the first failing segment's error is
    kept in ``segment_error`` and its zero-based position in ``index``.
    """

    def __init__(
        self,
        kind: NameErrorKind,
        *,
        segment_error: SegmentError | None = None,
        index: int | None = None,
    ) -> None:
        self.kind = kind
        self.segment_error = segment_error
        self.index = index
        if segment_error is not None:
            message = f"segment {index}: {segment_error}"
        else:
            message = _NAME_MESSAGES.get(kind, str(kind))
        super().__init__(message)


class FullyQualifiedDomainNameError(CompositeNameError):
    """Raised when text or segments do not form a fully qualified name."""


class PartiallyQualifiedDomainNameError(CompositeNameError):
    """Raised when text or segments do not form a partially qualified name."""


class PatternError(CompositeNameError):
    """Raised when a pattern contains an invalid segment."""


class SuffixMismatchError(DomainNameError):
    """Subtraction failed: ``suffix`` does not terminate ``name``.

    ``name`` is the original minuend, untouched. Callers should read this
    as "no relation", never as partial progress.
    """

    def __init__(
        self, name: FullyQualifiedDomainName, suffix: FullyQualifiedDomainName
    ) -> None:
        self.name = name
        self.suffix = suffix
        super().__init__(f"{suffix} is not a suffix of {name}")
