"""Wildcard patterns over domain names.

A pattern describes a set of names, e.g. ``*.example.org`` or
``dev*.example.@``. Each pattern segment is one of:

- a literal label (``www``),
- the standalone wildcard ``*``, matching any label, and at the leading
  position any number of extra leading labels,
- a partial wildcard with one ``*`` and a literal head/tail (``dev*``),
- the standalone origin marker ``@``, replaced by a zone root via
  :meth:`Pattern.with_origin`.

Patterns are agnostic to qualification: ``example.org.`` and
``example.org`` parse to equal patterns and match FQNs and PQNs alike.
Matching never fails, it only answers yes or no.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dnsnames.domain._schema import text_schema
from dnsnames.domain.errors import NameErrorKind, PatternError, SegmentError, SegmentErrorKind
from dnsnames.domain.names import (
    SEPARATOR,
    DomainName,
    FullyQualifiedDomainName,
    PartiallyQualifiedDomainName,
)
from dnsnames.domain.segment import (
    ORIGIN,
    SEGMENT_CHARACTERS,
    WILDCARD,
    Segment,
    check_label,
    fold_case,
)

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import core_schema


@dataclass(frozen=True, order=True, repr=False)
class PatternSegment:
    """A label that may contain one ``*`` anywhere, or be exactly ``@``."""

    value: str

    def __post_init__(self) -> None:
        value = fold_case(self.value)
        check_label(value, SEGMENT_CHARACTERS)
        if value.count(WILDCARD) > 1:
            raise SegmentError(SegmentErrorKind.MULTIPLE_WILDCARDS)
        if ORIGIN in value and len(value) != 1:
            raise SegmentError(SegmentErrorKind.NON_STANDALONE_ORIGIN)
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, text: str) -> PatternSegment:
        return cls(text)

    @classmethod
    def literal(cls, segment: Segment) -> PatternSegment:
        """The pattern segment matching exactly *segment*."""
        return cls(segment.value)

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD

    @property
    def is_origin(self) -> bool:
        return self.value == ORIGIN

    def matches(self, segment: Segment) -> bool:
        """Match a single label.

        Exact equality always matches. Otherwise the label must start with
        the text before the ``*`` and end with the text after it. Head and
        tail may overlap on short labels, so ``a*a`` matches ``a``.
        """
        if self.value == segment.value:
            return True

        head, star, tail = self.value.partition(WILDCARD)
        if not star:
            return False
        return segment.value.startswith(head) and segment.value.endswith(tail)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PatternSegment({self.value!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return text_schema(cls, cls.parse)


@dataclass(frozen=True, order=True, repr=False)
class Pattern:
    """An ordered sequence of pattern segments, most-specific first."""

    segments: tuple[PatternSegment, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Parse *text*; one trailing dot is accepted and ignored.

        Raises:
            PatternError: Wrapping the first invalid segment, in textual order.
        """
        body = text.removesuffix(SEPARATOR)
        if not body:
            return cls(())

        segments: list[PatternSegment] = []
        for index, label in enumerate(body.split(SEPARATOR)):
            try:
                segments.append(PatternSegment(label))
            except SegmentError as exc:
                raise PatternError(
                    NameErrorKind.SEGMENT_ERROR, segment_error=exc, index=index
                ) from exc
        return cls(tuple(segments))

    @property
    def is_origin_relative(self) -> bool:
        """True if the least-specific segment is the origin marker."""
        return bool(self.segments) and self.segments[-1].is_origin

    def with_origin(self, origin: FullyQualifiedDomainName) -> Pattern:
        """Replace a trailing ``@`` with the segments of *origin*.

        Patterns without a trailing origin marker are returned unchanged.

        Examples:
            >>> pattern = Pattern.parse("example.@")
            >>> str(pattern.with_origin(FullyQualifiedDomainName.parse("org.")))
            'example.org'
        """
        if not self.is_origin_relative:
            return self
        resolved = tuple(PatternSegment.literal(segment) for segment in origin.segments)
        return Pattern(self.segments[:-1] + resolved)

    def matches(
        self,
        name: DomainName | FullyQualifiedDomainName | PartiallyQualifiedDomainName,
    ) -> bool:
        """Match *name*, walking both sequences from the least-specific end.

        - A name with fewer segments than the pattern never matches.
        - A name with more segments only matches when the pattern leads
          with a standalone ``*``, which absorbs the extra labels.
        - Reaching a standalone ``*`` during the walk accepts everything
          more specific without further comparison.
        """
        candidate = name.segments
        if len(candidate) < len(self.segments):
            return False
        if len(candidate) > len(self.segments) and not (
            self.segments and self.segments[0].is_wildcard
        ):
            return False

        for pattern_segment, segment in zip(
            reversed(self.segments), reversed(candidate), strict=False
        ):
            if pattern_segment.is_wildcard:
                return True
            if not pattern_segment.matches(segment):
                return False
        return True

    def __iter__(self) -> Iterator[PatternSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(str(self))

    def __str__(self) -> str:
        return SEPARATOR.join(str(segment) for segment in self.segments)

    def __repr__(self) -> str:
        return f"Pattern({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return text_schema(cls, cls.parse)
